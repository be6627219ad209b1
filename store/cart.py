# store/cart.py
"""
The cart is a list of line items kept under a single state key.

Everything else (badge, cart page, checkout summary) is derived from
CartStore.get_items() at render time.
"""
import logging
from dataclasses import asdict, dataclass
from decimal import Decimal, InvalidOperation
from urllib.parse import quote, unquote

from django.conf import settings

from .state import CART_KEY

logger = logging.getLogger(__name__)

# Characters encodeURI leaves alone, so already-valid URLs are unchanged.
URL_SAFE_CHARS = ";,/?:@&=+$!*'()#"


@dataclass
class CartItem:
    id: str
    name: str
    price: Decimal
    image: str = ''
    quantity: int = 1

    @property
    def line_total(self):
        return (self.price * self.quantity).quantize(Decimal('0.01'))

    def to_dict(self):
        data = asdict(self)
        data['price'] = str(self.price)
        return data

    @classmethod
    def from_dict(cls, data):
        """Build an item from stored data, raising ValueError if it is unusable."""
        if not isinstance(data, dict) or not data.get('id'):
            raise ValueError("cart entry has no id")
        try:
            price = Decimal(str(data.get('price') or 0))
            quantity = int(data.get('quantity', 1))
            if not price.is_finite():
                raise ValueError("price is not a finite number")
        except (InvalidOperation, TypeError, ValueError) as e:
            raise ValueError(f"bad cart entry {data.get('id')!r}: {e}")
        if price < 0:
            raise ValueError(f"negative price for {data.get('id')!r}")
        if quantity < 1:
            raise ValueError(f"quantity below 1 for {data.get('id')!r}")
        return cls(
            id=str(data['id']),
            name=str(data.get('name') or ''),
            price=price,
            image=str(data.get('image') or ''),
            quantity=quantity,
        )


def normalize_image_url(url):
    if not url:
        return url
    return quote(unquote(url), safe=URL_SAFE_CHARS)


def badge_label(count, cap=None):
    cap = cap if cap is not None else getattr(settings, 'STORE_BADGE_CAP', 99)
    return f"{cap}+" if count > cap else str(count)


class CartStore:
    def __init__(self, state):
        self.state = state

    def get_items(self):
        raw = self.state.get_json(CART_KEY, [])
        if not isinstance(raw, list):
            logger.warning("Stored cart is not a list, treating as empty")
            return []
        items = []
        for entry in raw:
            try:
                items.append(CartItem.from_dict(entry))
            except ValueError as e:
                logger.warning("Skipping stored cart entry: %s", e)
        return items

    def save(self, items):
        self.state.set_json(CART_KEY, [item.to_dict() for item in items])
        logger.debug("Cart saved: %d line(s), %d unit(s)", len(items), sum(i.quantity for i in items))

    def add_item(self, new_item):
        items = self.get_items()
        for item in items:
            if item.id == new_item.id:
                item.quantity += new_item.quantity
                break
        else:
            if new_item.image:
                new_item.image = normalize_image_url(new_item.image)
            items.append(new_item)
        self.save(items)

    def set_quantity(self, item_id, quantity):
        if quantity < 1:
            self.remove_item(item_id)
            return
        items = self.get_items()
        for item in items:
            if item.id == item_id:
                item.quantity = quantity
                self.save(items)
                return

    def remove_item(self, item_id):
        items = self.get_items()
        remaining = [item for item in items if item.id != item_id]
        if len(remaining) != len(items):
            self.save(remaining)

    def clear(self):
        self.save([])

    def count(self):
        return sum(item.quantity for item in self.get_items())

    def badge(self):
        return badge_label(self.count())

    def migrate_images(self):
        items = self.get_items()
        changed = False
        for item in items:
            if item.image:
                normalized = normalize_image_url(item.image)
                if normalized != item.image:
                    item.image = normalized
                    changed = True
        if changed:
            self.save(items)
        return changed
