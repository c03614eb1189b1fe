# schemas/limits.py
#
# Upper bounds for client-supplied integers. Ids and stock live in 32-bit
# INTEGER columns; line totals and transaction totals are BIGINT.

MAX_ID = 2**31 - 1
MAX_STOCK = 2**31 - 1
MAX_PRICE = 100_000_000
MAX_QUANTITY = 10_000
MAX_CHECKOUT_ITEMS = 200
MAX_OFFSET = 1_000_000
