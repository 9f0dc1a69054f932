import os
from dotenv import load_dotenv

load_dotenv()


def parse_bool(string: str) -> bool:
    return string.strip().lower() not in ["", "0", "false", "no", "off"]


BOARD_WIDTH_PX = int(os.environ.get("REVERSI_BOARD_WIDTH_PX", "600"))
FRAME_RATE = int(os.environ.get("REVERSI_FRAME_RATE", "60"))
SHOW_LEGAL_MOVES = parse_bool(os.environ.get("REVERSI_SHOW_LEGAL_MOVES", "1"))
