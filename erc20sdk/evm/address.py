from eth_typing import ChecksumAddress
from eth_utils.address import to_checksum_address


class AddressEncoder:
    def hex_to_address(self, address: str) -> ChecksumAddress:
        return to_checksum_address(address)
