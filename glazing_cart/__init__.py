"""
Glazing cart: turns free-form glazing measurements into calculation-engine
project carts, and moves quotes between the UI and the quote service.
"""
