from django.urls import path
from . import views

urlpatterns = [
    path('', views.catalog, name='home'),  # homepage
    path('catalog/', views.catalog, name='catalog'),
    path('cart/', views.cart_view, name='cart'),
    path('cart/add/<str:product_id>/', views.add_to_cart, name='add_to_cart'),
    path('cart/update/', views.update_cart, name='update_cart'),
    path('cart/remove/', views.remove_from_cart, name='remove_from_cart'),
    path('cart/update-item/', views.update_cart_item, name='update_cart_item'),
    path('cart/voucher/', views.apply_voucher, name='apply_voucher'),
    path('cart/voucher/remove/', views.remove_voucher, name='remove_voucher'),
    path('checkout/', views.checkout, name='checkout'),
    path('checkout/update/', views.update_checkout_item, name='update_checkout_item'),
    path('login/', views.login_view, name='login'),
    path('logout/', views.logout_view, name='logout'),
]
