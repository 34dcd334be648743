from termcolor import colored

###############################################################################
# Output prefixes
###############################################################################

CHECKMARK    = '[' + colored("✓", "green") + ']'
CROSSMARK    = '[' + colored("✗", "red") + ']'
SKIPMARK     = '[' + colored("-", "yellow") + ']'
INFOMARK     = '[' + colored("i", "blue") + ']'


def _message(prefix: str, raw_prefix: str, *args) -> None:
    msg = '\n'.join(str(arg) for arg in args)
    first = True
    for line in msg.split('\n'):
        if first: print(f"{prefix} {line}")
        else:     print(f"{' ' * len(raw_prefix)} {line}")
        first = False

# Use CROSSMARK for errors and missing headers
def error(*msg): _message(CROSSMARK, '[✗]', *msg)

# Use SKIPMARK for files left untouched
def skipped(*msg): _message(SKIPMARK, '[-]', *msg)

# Use INFOMARK for information
def info(*msg): _message(INFOMARK, '[i]', *msg)

# Use CHECKMARK for success
def success(*msg): _message(CHECKMARK, '[✓]', *msg)
