"""
Console output for the table server. Lines carry a "[TAG] " prefix naming
the part of the server that wrote them (ENGINE, DECK, SOCKET, APP).
"""

def format_line(msg, tag=None):
    if tag:
        return f"[{tag}] {msg}"
    return str(msg)


def safe_print(msg, tag=None):
    """
    Print a tagged line, falling back to ASCII when the console can't encode
    it. Narrative lines carry emoji (🔴 ⚪ 💥 ☠️) that a latin-1 VPS console rejects.
    """
    line = format_line(msg, tag)
    try:
        print(line)
    except UnicodeEncodeError:
        print(line.encode('ascii', errors='replace').decode('ascii'))
