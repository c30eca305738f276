MAX_INPUT_KB = 64
MAX_INPUT_BYTES = MAX_INPUT_KB * 1024
