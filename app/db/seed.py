# app/db/seed.py
# Reference countries and the starting vegetable catalog

from sqlalchemy import func
from sqlalchemy.orm import Session
from app.models.models import Country
from app.models.product import Product
import logging

logger = logging.getLogger(__name__)

# (code, name, phone_code)
COUNTRIES = [
    ("US", "United States", "+1"),
    ("GB", "United Kingdom", "+44"),
    ("EG", "Egypt", "+20"),
    ("SA", "Saudi Arabia", "+966"),
    ("AE", "United Arab Emirates", "+971"),
    ("DE", "Germany", "+49"),
    ("FR", "France", "+33"),
    ("IT", "Italy", "+39"),
    ("ES", "Spain", "+34"),
    ("NL", "Netherlands", "+31"),
    ("BE", "Belgium", "+32"),
    ("CH", "Switzerland", "+41"),
    ("AT", "Austria", "+43"),
    ("SE", "Sweden", "+46"),
    ("NO", "Norway", "+47"),
    ("DK", "Denmark", "+45"),
    ("FI", "Finland", "+358"),
    ("PL", "Poland", "+48"),
    ("PT", "Portugal", "+351"),
    ("GR", "Greece", "+30"),
    ("IE", "Ireland", "+353"),
    ("CZ", "Czech Republic", "+420"),
    ("RO", "Romania", "+40"),
    ("HU", "Hungary", "+36"),
    ("TR", "Turkey", "+90"),
    ("RU", "Russia", "+7"),
    ("IN", "India", "+91"),
    ("CN", "China", "+86"),
    ("JP", "Japan", "+81"),
    ("KR", "South Korea", "+82"),
    ("AU", "Australia", "+61"),
    ("NZ", "New Zealand", "+64"),
    ("CA", "Canada", "+1"),
    ("MX", "Mexico", "+52"),
    ("BR", "Brazil", "+55"),
    ("AR", "Argentina", "+54"),
    ("CL", "Chile", "+56"),
    ("CO", "Colombia", "+57"),
    ("ZA", "South Africa", "+27"),
    ("NG", "Nigeria", "+234"),
]

PRODUCTS = [
    # Leafy Greens
    {"name": "Fresh Spinach", "description": "Tender baby spinach leaves, perfect for salads and smoothies. Rich in iron and vitamins.", "price_per_kg": 4.99, "image_url": "/images/products/spinach.jpg", "stock_quantity": 100, "seller_name": "Green Valley Farms", "category": "Leafy Greens"},
    {"name": "Organic Kale", "description": "Curly kale packed with nutrients. Great for chips, smoothies, or sautéed dishes.", "price_per_kg": 5.49, "image_url": "/images/products/kale.jpg", "stock_quantity": 80, "seller_name": "Organic Harvest Co.", "category": "Leafy Greens"},
    {"name": "Romaine Lettuce", "description": "Crisp romaine hearts, ideal for Caesar salads and wraps.", "price_per_kg": 3.99, "image_url": "/images/products/romaine.jpg", "stock_quantity": 120, "seller_name": "Fresh Fields Farm", "category": "Leafy Greens"},
    {"name": "Arugula", "description": "Peppery arugula leaves for gourmet salads and pizza toppings.", "price_per_kg": 6.99, "image_url": "/images/products/arugula.jpg", "stock_quantity": 60, "seller_name": "Mediterranean Gardens", "category": "Leafy Greens"},
    {"name": "Swiss Chard", "description": "Colorful rainbow chard with tender leaves and crunchy stems.", "price_per_kg": 4.49, "image_url": "/images/products/chard.jpg", "stock_quantity": 70, "seller_name": "Rainbow Produce", "category": "Leafy Greens"},
    {"name": "Collard Greens", "description": "Southern-style collard greens, perfect for braising and stewing.", "price_per_kg": 3.49, "image_url": "/images/products/collard.jpg", "stock_quantity": 90, "seller_name": "Southern Harvest", "category": "Leafy Greens"},
    {"name": "Iceberg Lettuce", "description": "Classic crunchy iceberg lettuce for burgers and salads.", "price_per_kg": 2.99, "image_url": "/images/products/iceberg.jpg", "stock_quantity": 150, "seller_name": "Cool Farms", "category": "Leafy Greens"},
    {"name": "Bok Choy", "description": "Baby bok choy, perfect for stir-fries and Asian cuisine.", "price_per_kg": 5.99, "image_url": "/images/products/bokchoy.jpg", "stock_quantity": 85, "seller_name": "Asian Garden Fresh", "category": "Leafy Greens"},

    # Root Vegetables
    {"name": "Organic Carrots", "description": "Sweet and crunchy carrots, freshly harvested. Great for snacking or cooking.", "price_per_kg": 2.99, "image_url": "/images/products/carrots.jpg", "stock_quantity": 200, "seller_name": "Root Valley Farm", "category": "Root Vegetables"},
    {"name": "Red Beets", "description": "Earthy red beets, perfect for roasting or juicing.", "price_per_kg": 3.49, "image_url": "/images/products/beets.jpg", "stock_quantity": 100, "seller_name": "Ruby Root Farms", "category": "Root Vegetables"},
    {"name": "Sweet Potatoes", "description": "Orange-fleshed sweet potatoes, naturally sweet and nutritious.", "price_per_kg": 2.79, "image_url": "/images/products/sweetpotato.jpg", "stock_quantity": 180, "seller_name": "Southern Harvest", "category": "Root Vegetables"},
    {"name": "Russet Potatoes", "description": "Classic baking potatoes with fluffy texture when cooked.", "price_per_kg": 1.99, "image_url": "/images/products/russet.jpg", "stock_quantity": 250, "seller_name": "Idaho Farms", "category": "Root Vegetables"},
    {"name": "Red Potatoes", "description": "Waxy red potatoes, ideal for roasting and potato salads.", "price_per_kg": 2.49, "image_url": "/images/products/redpotato.jpg", "stock_quantity": 200, "seller_name": "Valley Spuds", "category": "Root Vegetables"},
    {"name": "Parsnips", "description": "Sweet parsnips, excellent for roasting alongside other root vegetables.", "price_per_kg": 4.29, "image_url": "/images/products/parsnips.jpg", "stock_quantity": 75, "seller_name": "Heritage Roots", "category": "Root Vegetables"},
    {"name": "Turnips", "description": "Mild turnips with a subtle peppery flavor.", "price_per_kg": 2.99, "image_url": "/images/products/turnips.jpg", "stock_quantity": 90, "seller_name": "Farm Fresh Direct", "category": "Root Vegetables"},
    {"name": "Radishes", "description": "Crisp red radishes with a peppery bite, great for salads.", "price_per_kg": 3.99, "image_url": "/images/products/radishes.jpg", "stock_quantity": 110, "seller_name": "Quick Crops", "category": "Root Vegetables"},

    # Alliums
    {"name": "Yellow Onions", "description": "Versatile yellow onions, a kitchen staple for countless recipes.", "price_per_kg": 1.49, "image_url": "/images/products/yellowonion.jpg", "stock_quantity": 300, "seller_name": "Allium Valley", "category": "Alliums"},
    {"name": "Red Onions", "description": "Mild red onions, perfect for salads and grilling.", "price_per_kg": 1.99, "image_url": "/images/products/redonion.jpg", "stock_quantity": 200, "seller_name": "Allium Valley", "category": "Alliums"},
    {"name": "Fresh Garlic", "description": "Aromatic garlic bulbs, essential for any savory dish.", "price_per_kg": 8.99, "image_url": "/images/products/garlic.jpg", "stock_quantity": 150, "seller_name": "Garlic Grove", "category": "Alliums"},
    {"name": "Leeks", "description": "Mild and sweet leeks, wonderful in soups and gratins.", "price_per_kg": 4.99, "image_url": "/images/products/leeks.jpg", "stock_quantity": 80, "seller_name": "Welsh Gardens", "category": "Alliums"},
    {"name": "Green Onions", "description": "Fresh scallions for garnishing and Asian dishes.", "price_per_kg": 5.99, "image_url": "/images/products/greenonion.jpg", "stock_quantity": 100, "seller_name": "Spring Farm", "category": "Alliums"},
    {"name": "Shallots", "description": "Delicate shallots with a mild, sweet flavor.", "price_per_kg": 7.99, "image_url": "/images/products/shallots.jpg", "stock_quantity": 70, "seller_name": "French Gardens", "category": "Alliums"},

    # Cruciferous
    {"name": "Broccoli", "description": "Fresh broccoli crowns, packed with vitamins and fiber.", "price_per_kg": 3.99, "image_url": "/images/products/broccoli.jpg", "stock_quantity": 120, "seller_name": "Green Crown Farms", "category": "Cruciferous"},
    {"name": "Cauliflower", "description": "White cauliflower heads, versatile for roasting, mashing, or rice.", "price_per_kg": 3.49, "image_url": "/images/products/cauliflower.jpg", "stock_quantity": 100, "seller_name": "Cloud Nine Produce", "category": "Cruciferous"},
    {"name": "Brussels Sprouts", "description": "Tender Brussels sprouts, amazing when roasted with bacon.", "price_per_kg": 4.99, "image_url": "/images/products/brussels.jpg", "stock_quantity": 90, "seller_name": "Belgian Harvest", "category": "Cruciferous"},
    {"name": "Green Cabbage", "description": "Crunchy green cabbage for coleslaw, stir-fries, and sauerkraut.", "price_per_kg": 1.99, "image_url": "/images/products/greencabbage.jpg", "stock_quantity": 130, "seller_name": "Cabbage Patch Farm", "category": "Cruciferous"},
    {"name": "Red Cabbage", "description": "Vibrant red cabbage, perfect for colorful salads and braising.", "price_per_kg": 2.49, "image_url": "/images/products/redcabbage.jpg", "stock_quantity": 100, "seller_name": "Cabbage Patch Farm", "category": "Cruciferous"},
    {"name": "Napa Cabbage", "description": "Tender Napa cabbage for kimchi and Asian salads.", "price_per_kg": 3.29, "image_url": "/images/products/napacabbage.jpg", "stock_quantity": 85, "seller_name": "Asian Garden Fresh", "category": "Cruciferous"},

    # Peppers & Tomatoes
    {"name": "Red Bell Peppers", "description": "Sweet red bell peppers, perfect for roasting and stuffing.", "price_per_kg": 5.99, "image_url": "/images/products/redpepper.jpg", "stock_quantity": 100, "seller_name": "Pepper Paradise", "category": "Peppers"},
    {"name": "Green Bell Peppers", "description": "Crisp green bell peppers for salads and fajitas.", "price_per_kg": 3.99, "image_url": "/images/products/greenpepper.jpg", "stock_quantity": 120, "seller_name": "Pepper Paradise", "category": "Peppers"},
    {"name": "Yellow Bell Peppers", "description": "Sweet yellow peppers, great for snacking and cooking.", "price_per_kg": 5.49, "image_url": "/images/products/yellowpepper.jpg", "stock_quantity": 90, "seller_name": "Sunshine Produce", "category": "Peppers"},
    {"name": "Jalapeño Peppers", "description": "Spicy jalapeños for salsas and Mexican dishes.", "price_per_kg": 6.99, "image_url": "/images/products/jalapeno.jpg", "stock_quantity": 80, "seller_name": "Hot Pepper Farm", "category": "Peppers"},
    {"name": "Cherry Tomatoes", "description": "Sweet cherry tomatoes, perfect for snacking and salads.", "price_per_kg": 5.99, "image_url": "/images/products/cherrytomato.jpg", "stock_quantity": 110, "seller_name": "Vine Ripe Farms", "category": "Tomatoes"},
    {"name": "Roma Tomatoes", "description": "Meaty Roma tomatoes, ideal for sauces and cooking.", "price_per_kg": 3.99, "image_url": "/images/products/roma.jpg", "stock_quantity": 140, "seller_name": "Italian Gardens", "category": "Tomatoes"},
    {"name": "Beefsteak Tomatoes", "description": "Large slicing tomatoes for sandwiches and burgers.", "price_per_kg": 4.49, "image_url": "/images/products/beefsteak.jpg", "stock_quantity": 100, "seller_name": "Big Boy Farms", "category": "Tomatoes"},
    {"name": "Heirloom Tomatoes", "description": "Colorful heirloom varieties with exceptional flavor.", "price_per_kg": 7.99, "image_url": "/images/products/heirloom.jpg", "stock_quantity": 60, "seller_name": "Heritage Seeds", "category": "Tomatoes"},

    # Squash & Gourds
    {"name": "Zucchini", "description": "Tender green zucchini, great for grilling and spiralizing.", "price_per_kg": 3.49, "image_url": "/images/products/zucchini.jpg", "stock_quantity": 120, "seller_name": "Summer Squash Farm", "category": "Squash"},
    {"name": "Yellow Squash", "description": "Mild yellow squash, perfect for summer dishes.", "price_per_kg": 3.49, "image_url": "/images/products/yellowsquash.jpg", "stock_quantity": 110, "seller_name": "Summer Squash Farm", "category": "Squash"},
    {"name": "Butternut Squash", "description": "Sweet butternut squash, wonderful for soups and roasting.", "price_per_kg": 2.99, "image_url": "/images/products/butternut.jpg", "stock_quantity": 90, "seller_name": "Autumn Harvest", "category": "Squash"},
    {"name": "Acorn Squash", "description": "Decorative acorn squash with sweet, nutty flesh.", "price_per_kg": 2.79, "image_url": "/images/products/acorn.jpg", "stock_quantity": 80, "seller_name": "Autumn Harvest", "category": "Squash"},
    {"name": "Spaghetti Squash", "description": "Unique squash with stringy flesh, perfect pasta substitute.", "price_per_kg": 3.29, "image_url": "/images/products/spaghetti.jpg", "stock_quantity": 70, "seller_name": "Healthy Choice Farm", "category": "Squash"},
    {"name": "Cucumber", "description": "Cool crisp cucumbers, refreshing for salads and snacking.", "price_per_kg": 2.99, "image_url": "/images/products/cucumber.jpg", "stock_quantity": 150, "seller_name": "Cool Cucumber Co.", "category": "Squash"},

    # Beans & Peas
    {"name": "Green Beans", "description": "Tender green beans, perfect for steaming or sautéing.", "price_per_kg": 4.49, "image_url": "/images/products/greenbeans.jpg", "stock_quantity": 100, "seller_name": "Bean Valley", "category": "Beans & Peas"},
    {"name": "Snow Peas", "description": "Crisp snow peas for stir-fries and Asian dishes.", "price_per_kg": 6.99, "image_url": "/images/products/snowpeas.jpg", "stock_quantity": 70, "seller_name": "Asian Garden Fresh", "category": "Beans & Peas"},
    {"name": "Sugar Snap Peas", "description": "Sweet and crunchy snap peas, great for snacking.", "price_per_kg": 7.49, "image_url": "/images/products/snappeas.jpg", "stock_quantity": 65, "seller_name": "Sweet Pod Farm", "category": "Beans & Peas"},
    {"name": "Edamame", "description": "Fresh soybeans in pods, a healthy protein-rich snack.", "price_per_kg": 5.99, "image_url": "/images/products/edamame.jpg", "stock_quantity": 80, "seller_name": "Asian Garden Fresh", "category": "Beans & Peas"},

    # Other Vegetables
    {"name": "Fresh Corn", "description": "Sweet corn on the cob, perfect for grilling or boiling.", "price_per_kg": 3.99, "image_url": "/images/products/corn.jpg", "stock_quantity": 0, "seller_name": "Cornfield Farms", "category": "Other"},
    {"name": "Artichokes", "description": "Globe artichokes, a delicious gourmet treat when steamed.", "price_per_kg": 8.99, "image_url": "/images/products/artichoke.jpg", "stock_quantity": 40, "seller_name": "Mediterranean Gardens", "category": "Other"},
    {"name": "Asparagus", "description": "Tender asparagus spears, elegant when grilled or roasted.", "price_per_kg": 7.99, "image_url": "/images/products/asparagus.jpg", "stock_quantity": 60, "seller_name": "Spring Harvest", "category": "Other"},
    {"name": "Celery", "description": "Crisp celery stalks, great for snacking with dip or in soups.", "price_per_kg": 2.49, "image_url": "/images/products/celery.jpg", "stock_quantity": 130, "seller_name": "Crunchy Farms", "category": "Other"},
    {"name": "Eggplant", "description": "Purple Italian eggplant, perfect for grilling and baba ganoush.", "price_per_kg": 3.99, "image_url": "/images/products/eggplant.jpg", "stock_quantity": 85, "seller_name": "Mediterranean Gardens", "category": "Other"},
]


def seed_countries(db: Session) -> int:
    if db.query(func.count(Country.id)).scalar() > 0:
        return 0

    db.add_all(
        Country(code=code, name=name, phone_code=phone_code)
        for code, name, phone_code in COUNTRIES
    )
    db.commit()
    logger.info(f"Seeded {len(COUNTRIES)} countries")
    return len(COUNTRIES)


def seed_products(db: Session) -> int:
    if db.query(func.count(Product.id)).scalar() > 0:
        return 0

    db.add_all(
        Product(in_stock=data["stock_quantity"] > 0, **data)
        for data in PRODUCTS
    )
    db.commit()
    logger.info(f"Seeded {len(PRODUCTS)} products")
    return len(PRODUCTS)


def seed_database(db: Session) -> dict:
    """Insert reference data. Tables that already hold rows are left alone."""
    return {
        "countries": seed_countries(db),
        "products": seed_products(db),
    }
