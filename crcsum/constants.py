# Variant names, also used as JSON keys (lower-cased)
CRC16_NAME = "CRC16"
CRC32_NAME = "CRC32"

# CRC-16/ARC (IBM): polynomial 0x8005 (or 0xA001 in reversed form)
CRC16_WIDTH = 16
CRC16_POLY = 0xA001
CRC16_INIT = 0x0000
CRC16_XOROUT = 0x0000

# CRC-32/ISO-HDLC (ISO 3309, IEEE 802.3): polynomial 0x04C11DB7 (or 0xEDB88320 in reversed form)
CRC32_WIDTH = 32
CRC32_POLY = 0xEDB88320
CRC32_INIT = 0xFFFFFFFF
CRC32_XOROUT = 0xFFFFFFFF

SUPPORTED_WIDTHS = (CRC16_WIDTH, CRC32_WIDTH)

TABLE_SIZE = 256

BLOCK_SIZE = 65_536  # 64 KiB per read
