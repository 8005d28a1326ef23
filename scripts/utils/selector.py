from web3 import Web3


def function_selector(signature):
    """
    Four-byte selector of a canonical method signature, `0x` prefixed.

    The signature must be canonical: no spaces, no argument names and
    full type names, e.g. `transferOwnership(address)`.
    """
    return Web3.to_hex(Web3.keccak(text=signature)[:4])
