# store/checkout.py
import time

REQUIRED_FIELDS = ('fullName', 'email', 'phone', 'address', 'city')
PAYMENT_METHODS = (
    ('cod', 'Cash on Delivery'),
    ('gcash', 'GCash'),
    ('card', 'Credit / Debit Card'),
)

FIELD_REQUIRED = "This field is required."
EMAIL_INVALID = "Please enter a valid email address."
PAYMENT_REQUIRED = "Please select a payment method."


def validate_checkout(data):
    """
    Return a dict of field name -> error message. Empty means the order
    can be placed.
    """
    errors = {}
    for field in REQUIRED_FIELDS:
        if not (data.get(field) or '').strip():
            errors[field] = FIELD_REQUIRED

    if '@' not in (data.get('email') or ''):
        errors['email'] = EMAIL_INVALID

    if not (data.get('paymentMethod') or '').strip():
        errors['payment'] = PAYMENT_REQUIRED
    return errors


def order_reference(now=None):
    """Short order code: "OS" plus the last six digits of the millisecond clock."""
    millis = int((time.time() if now is None else now) * 1000)
    return 'OS' + str(millis)[-6:]


def customer_details(data):
    fields = REQUIRED_FIELDS + ('paymentMethod', 'notes')
    return {field: (data.get(field) or '').strip() for field in fields}
