"""Key names and fixed thresholds shared across the package.

Key formats must stay stable: other deployments read the same Redis keys.
"""

# ============== REDIS KEYS ==============
CART_REGISTRY_KEY = "carts"
CART_KEY_PREFIX = "cart:"
CART_PRODUCTS_SUFFIX = ":products"
CART_PAID_SUFFIX = ":isPaid"
CART_LINE_INFIX = ":product:"

# ============== PAID FLAG ==============
PAID = "1"
UNPAID = "0"

# ============== CART RULES ==============
LARGE_CART_THRESHOLD = 5  # carts with more distinct products than this are "large"
LINE_QUANTITY_FIELD = "quantity"

# ============== LOGGING ==============
DEFAULT_LOG_LEVEL = "INFO"
