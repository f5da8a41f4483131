"""JSON keys used in the receipts and errors log files."""

TS = "ts"
ADDRESS = "address"
ADDRESS_INDEX = "addressIndex"  # derived sub-account, 0-199
CHALLENGE_ID = "challenge_id"
NONCE = "nonce"
HASH = "hash"
CRYPTO_RECEIPT = "crypto_receipt"
IS_DEV_FEE = "isDevFee"
ERROR = "error"
RESPONSE = "response"
