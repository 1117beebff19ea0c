DEFAULT_CHARSET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    "!#$%&()*+,./:;<=>?@[]^_`{|}~\""
)

RADIX = 91

BIN_POW_13 = 2 ** 13
BIN_POW_14 = 2 ** 14

# Groups whose low 13 bits are <= this value take a 14th bit.
# 91 * 91 = 8281 leaves room for 8192 + 88 and no more.
THRESHOLD = 88

IO_KINDS = ("str", "bytes")
DEFAULT_VERSION = "default"
