"""Checkout API: Razorpay order creation, payment verification and order confirmation emails."""
