DEFAULT_KEY_TYPE = "int"
KEY_TYPES = {"int": int, "float": float, "str": str}
BENCH_SET_SIZE = 100000
BENCH_KEY_BITS = 32
