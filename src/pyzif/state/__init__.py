"""State layer.

The accumulator is the only mutable state of a subscription list view.
Everything that changes it goes through ``append`` and is gated by the
view's lifetime token.
"""
