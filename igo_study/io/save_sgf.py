"""
Utilities for writing trial positions as SGF files and renderable blocks.
"""


def board_block(sgf_content: str, move_number: int) -> str:
    """Create a fenced sgf block that opens the board at a given move.

    Args:
        sgf_content: SGF fragment to display
        move_number: Move the viewer should show

    Returns:
        Markdown code block with the viewer's move header
    """
    return f"```sgf\n<!-- move={move_number} -->\n{sgf_content}\n```"


def embed_link(sgf_path: str, move_number: int) -> str:
    """Create an embed link for a companion .sgf file at a given move."""
    return f"![[{sgf_path}|move={move_number}]]"


def save_sgf(sgf_content: str, filename: str):
    """Save SGF content to a file.

    Args:
        sgf_content: SGF formatted string
        filename: Path to save the file
    """
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(sgf_content)
    print(f"Saved SGF file: {filename}")
