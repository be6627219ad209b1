from django import template

from store.store_utils import format_price

register = template.Library()


@register.filter
def peso(value):
    return format_price(value)


@register.filter
def line_total(item):
    return format_price(item.price * item.quantity)
