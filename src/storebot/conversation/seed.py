"""
Default storefront seed data.

Sessions created without an explicit seed start from DEFAULT_RESPONSES.
FALLBACK_RESPONSES is the pool the last resolution tier picks from.
"""

DEFAULT_RESPONSES = {
    "hello": "Hi there! How can I help you today?",
    "hi": "Hello! How can I assist you?",
    "how are you": "I'm just a bot, but I'm functioning well! How can I help you?",
    "help": "I can help you with product information, store locations, and basic troubleshooting. What do you need?",
    "bye": "Goodbye! Feel free to chat again if you need assistance.",
    "thank you": "You're welcome! Is there anything else I can help with?",
    "thanks": "You're welcome! Is there anything else I can help with?",
    "product": "We offer smartphones, laptops, and accessories. Which category are you interested in?",
    "smartphone": "We have the latest models from Apple, Samsung, and other brands. Would you like specific information?",
    "laptop": "Our laptop collection includes gaming, business, and everyday use models. What are you looking for?",
    "store": "You can find our stores in major cities. Use the store locator on the customer dashboard to find the nearest one.",
    "price": "Prices vary by product. You can check specific prices on the product pages or visit a store near you.",
    "discount": "We regularly offer discounts and promotions. Check the offers section for current deals.",
    "warranty": "Most products come with a standard 1-year warranty. Extended warranty options are available at checkout.",
    "return policy": "We offer a 30-day return policy for most products, provided they're in original condition with packaging.",
}

FALLBACK_RESPONSES = (
    "I'm not sure I understand. Could you rephrase that?",
    "I don't have information on that yet. Can I help with something else?",
    "I'm still learning! Could you try asking something else?",
    "I don't have an answer for that. Would you like to know about our products or stores instead?",
)
