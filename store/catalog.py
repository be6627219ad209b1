# store/catalog.py
from decimal import Decimal
from typing import NamedTuple

from django.templatetags.static import static

from .cart import CartItem


class Product(NamedTuple):
    id: str
    name: str
    price: Decimal
    image: str
    category: str = ''
    description: str = ''

    def to_cart_item(self, quantity=1):
        return CartItem(id=self.id, name=self.name, price=self.price, image=static(self.image), quantity=quantity)


PRODUCTS = (
    Product('ballpen-black-12', 'Ballpen Black (Box of 12)', Decimal('96.00'),
            'store/images/ballpen black.svg', 'Writing', 'Smooth 0.7mm ink, twelve pens per box.'),
    Product('bond-paper-a4', 'Bond Paper A4 (500 sheets)', Decimal('285.00'),
            'store/images/bond paper a4.svg', 'Paper', '70gsm multipurpose copy paper.'),
    Product('stapler-heavy', 'Heavy Duty Stapler', Decimal('450.00'),
            'store/images/stapler.svg', 'Desk Tools', 'Staples up to 100 sheets.'),
    Product('notebook-spiral', 'Spiral Notebook', Decimal('55.00'),
            'store/images/spiral notebook.svg', 'Paper', '80 leaves, college ruled.'),
    Product('highlighter-set', 'Highlighter Set (5 colors)', Decimal('125.00'),
            'store/images/highlighters.svg', 'Writing', 'Chisel tip, fast drying.'),
    Product('office-chair', 'Ergonomic Office Chair', Decimal('4999.00'),
            'store/images/office chair.svg', 'Furniture', 'Mesh back with lumbar support.'),
    Product('desk-organizer', 'Desk Organizer', Decimal('349.50'),
            'store/images/desk organizer.svg', 'Desk Tools', 'Five compartments and a drawer.'),
    Product('calculator-12', '12-Digit Calculator', Decimal('650.00'),
            'store/images/calculator.svg', 'Electronics', 'Solar and battery powered.'),
)

_BY_ID = {product.id: product for product in PRODUCTS}


def all_products():
    return list(PRODUCTS)


def get_product(product_id):
    return _BY_ID.get(str(product_id))
