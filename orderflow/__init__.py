"""orderflow: an order-submission workflow built on ports and adapters.

An order is paid for, shipped when payment succeeds, and audited; any
failure along the way is reported as an unsuccessful response.
"""

__version__ = "0.1.0"
