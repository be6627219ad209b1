from django.shortcuts import render, redirect, reverse
from django.http import Http404, JsonResponse
from django.contrib import messages
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST
from urllib.parse import urlencode
import json
import logging

from .auth import defer_add, is_logged_in, log_in, log_out, pop_post_login_redirect, current_user
from .catalog import all_products, get_product
from .checkout import PAYMENT_METHODS, customer_details, order_reference, validate_checkout
from .exceptions import StoreError
from .state import state_for
from .cart import badge_label
from .store_utils import get_cart, get_cart_count, get_totals, parse_quantity
from .vouchers import VoucherResolver

logger = logging.getLogger(__name__)


def _safe_next(request, url, fallback='catalog'):
    if url and url_has_allowed_host_and_scheme(url, allowed_hosts={request.get_host()},
                                               require_https=request.is_secure()):
        return url
    return reverse(fallback)


def _login_url(return_to):
    return f"{reverse('login')}?{urlencode({'return': return_to})}"


# -------------------------------
# Catalog
# -------------------------------
def catalog(request):
    return render(request, 'store/catalog.html', {'products': all_products()})


@require_POST
def add_to_cart(request, product_id):
    product = get_product(product_id)
    if product is None:
        raise Http404("No such product")

    quantity = parse_quantity(request.POST.get('quantity', 1))
    item = product.to_cart_item(quantity=quantity if quantity > 0 else 1)
    next_url = _safe_next(request, request.POST.get('next') or request.GET.get('next'))

    state = state_for(request)
    if not is_logged_in(state):
        defer_add(state, item, return_to=next_url)
        messages.info(request, "Please sign in to continue")
        return redirect(_login_url(next_url))

    get_cart(request).add_item(item)
    messages.success(request, "Added to cart!")
    return redirect(next_url)


# -------------------------------
# CART SYSTEM
# -------------------------------
def cart_view(request):
    items = get_cart(request).get_items()
    totals = get_totals(request, items)
    voucher = VoucherResolver(state_for(request)).resolve(totals.applied_voucher)
    return render(request, 'store/cart.html', {
        'cart_items': items,
        'totals': totals,
        'voucher': voucher,
    })


@require_POST
def update_cart(request):
    product_id = request.POST.get('product_id', '')
    qty = parse_quantity(request.POST.get('quantity'))
    cart = get_cart(request)
    if qty < 1:
        cart.remove_item(product_id)
    else:
        cart.set_quantity(product_id, qty)
    return redirect('cart')


@require_POST
def remove_from_cart(request):
    get_cart(request).remove_item(str(request.POST.get('product_id', '')))
    if request.POST.get('next') == 'checkout':
        return redirect('checkout')
    return redirect('cart')


@require_POST
def update_cart_item(request):
    try:
        data = json.loads(request.body or b'{}')
    except ValueError:
        return JsonResponse({'status': 'error', 'message': 'Invalid JSON'}, status=400)
    if not isinstance(data, dict):
        return JsonResponse({'status': 'error', 'message': 'Invalid request'}, status=400)

    product_id = str(data.get('product_id', ''))
    action = data.get('action')
    cart = get_cart(request)
    items = {item.id: item for item in cart.get_items()}

    if action not in ('increase', 'decrease', 'remove', 'set'):
        return JsonResponse({'status': 'error', 'message': f'Unknown action {action!r}'}, status=400)

    if product_id in items:
        current = items[product_id].quantity
        if action == 'increase':
            cart.set_quantity(product_id, current + 1)
        elif action == 'decrease':
            if current - 1 < 1:
                cart.remove_item(product_id)
            else:
                cart.set_quantity(product_id, current - 1)
        elif action == 'remove':
            cart.remove_item(product_id)
        else:
            qty = parse_quantity(data.get('quantity'))
            if qty < 1:
                cart.remove_item(product_id)
            else:
                cart.set_quantity(product_id, qty)

    count = get_cart_count(request)
    return JsonResponse({
        'status': 'success',
        'cart_count': count,
        'badge': badge_label(count),
        'totals': get_totals(request).as_dict(),
    })


# -------------------------------
# VOUCHERS
# -------------------------------
@require_POST
def apply_voucher(request):
    resolver = VoucherResolver(state_for(request))
    try:
        voucher = resolver.apply(request.POST.get('code', ''), get_cart(request).get_items())
    except StoreError as e:
        messages.error(request, str(e))
    else:
        messages.success(request, f"Voucher {voucher.code} applied")
    return redirect('cart')


@require_POST
def remove_voucher(request):
    VoucherResolver(state_for(request)).clear_active()
    messages.info(request, "Voucher removed")
    return redirect('cart')


# -------------------------------
# CHECKOUT
# -------------------------------
def _checkout_context(request, items, **extra):
    totals = get_totals(request, items)
    context = {
        'cart_items': items,
        'totals': totals,
        'payment_methods': PAYMENT_METHODS,
        'errors': {},
        'form': {},
    }
    context.update(extra)
    return context


def checkout(request):
    items = get_cart(request).get_items()
    if not items:
        messages.info(request, "Your cart is empty. Please add items before checking out.")
        return redirect('catalog')

    if request.method == 'POST':
        state = state_for(request)
        if not is_logged_in(state):
            messages.info(request, "Please sign in to continue")
            return redirect(_login_url(reverse('checkout')))

        errors = validate_checkout(request.POST)
        if errors:
            messages.error(request, "Please correct the errors in the form before placing your order.")
            return render(request, 'store/checkout.html', _checkout_context(
                request, items, errors=errors, form=request.POST,
            ))

        totals = get_totals(request, items)
        order_number = order_reference()
        logger.info(
            "Order placed: %s by %s, %d item(s), total %s, customer=%s",
            order_number, current_user(state), totals.item_count, totals.total,
            customer_details(request.POST),
        )
        get_cart(request).clear()
        return render(request, 'store/checkout.html', _checkout_context(
            request, items, order_number=order_number, placed_totals=totals,
        ))

    return render(request, 'store/checkout.html', _checkout_context(request, items))


@require_POST
def update_checkout_item(request):
    product_id = request.POST.get('product_id', '')
    qty = parse_quantity(request.POST.get('quantity'))
    get_cart(request).set_quantity(product_id, max(qty, 1))
    return redirect('checkout')


# -------------------------------
# LOGIN FLAG
# -------------------------------
def login_view(request):
    state = state_for(request)
    return_to = request.GET.get('return') or request.POST.get('return', '')

    if request.method == 'POST':
        try:
            log_in(state, request.POST.get('username'))
        except StoreError as e:
            messages.error(request, str(e))
            return render(request, 'store/login.html', {'return_to': return_to}, status=400)

        stored = pop_post_login_redirect(state)
        messages.success(request, f"Welcome, {current_user(state)}!")
        return redirect(_safe_next(request, return_to or stored))

    return render(request, 'store/login.html', {'return_to': return_to})


@require_POST
def logout_view(request):
    log_out(state_for(request))
    messages.info(request, "Logged out, cart cleared")
    return redirect('catalog')
