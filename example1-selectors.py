from bit_keccak import Keccak256, keccak
from bit_keccak.bits import bits_to_hex, bytes_to_bits


def selector(signature: str) -> str:
    """Compute a Solidity function selector."""
    return keccak(signature.encode('utf8'))[:4].hex()


# Sandbox
if __name__ == '__main__':
    # Function selectors and an event topic
    print(selector('transfer(address,uint256)'))  # a9059cbb
    print(selector('balanceOf(address)'))  # 70a08231
    print(keccak(b'Transfer(address,address,uint256)').hex())

    # A fixed-size hasher for 32-byte words, as used for storage slots
    word = Keccak256(256)
    slot = (0).to_bytes(32, 'big')
    print(word.hexdigest(slot))

    # A message spanning three blocks, with progress output
    data = bytes(300)
    h = Keccak256(8*len(data), verbose=True)
    print(f"{h.blocks} blocks:", bits_to_hex(h(bytes_to_bits(data))))
