from . import notifications, payments_razorpay

__all__ = ["notifications", "payments_razorpay"]
