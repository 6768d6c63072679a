from enum import IntEnum


class CommandType(IntEnum):
    # Swaps, permits and payments
    V3_SWAP_EXACT_IN = 0x00
    V3_SWAP_EXACT_OUT = 0x01
    PERMIT2_TRANSFER_FROM = 0x02
    PERMIT2_PERMIT_BATCH = 0x03
    SWEEP = 0x04
    TRANSFER = 0x05
    PAY_PORTION = 0x06
    # 0x07 reserved

    V2_SWAP_EXACT_IN = 0x08
    V2_SWAP_EXACT_OUT = 0x09
    PERMIT = 0x0A
    WRAP_ETH = 0x0B
    UNWRAP_WETH = 0x0C
    PERMIT2_TRANSFER_FROM_BATCH = 0x0D
    # 0x0E - 0x0F reserved

    # NFT markets
    SEAPORT = 0x10
    LOOKS_RARE_721 = 0x11
    NFTX = 0x12
    CRYPTOPUNKS = 0x13
    LOOKS_RARE_1155 = 0x14
    OWNER_CHECK_721 = 0x15
    OWNER_CHECK_1155 = 0x16
    # 0x17 reserved

    X2Y2_721 = 0x18
    SUDOSWAP = 0x19
    NFT20 = 0x1A
    X2Y2_1155 = 0x1B
    FOUNDATION = 0x1C


ALLOW_REVERT_FLAG = 0x80
COMMAND_TYPE_MASK = 0x7F

# Third-party market fills; a failing fill must not abort the batch
REVERTABLE_COMMANDS = frozenset([
    CommandType.SEAPORT,
    CommandType.NFTX,
    CommandType.LOOKS_RARE_721,
    CommandType.LOOKS_RARE_1155,
    CommandType.X2Y2_721,
    CommandType.X2Y2_1155,
    CommandType.FOUNDATION,
    CommandType.SUDOSWAP,
    CommandType.NFT20,
    CommandType.CRYPTOPUNKS,
])
