"""Business calendars, business day adjustment, day count conventions, coupon dates and a simple currency converter."""

__version__ = "0.1.0"