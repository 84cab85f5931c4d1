import emoji


def noescape(text: str) -> str:
    return text


def htmlescape(text: str) -> str:
    # Ampersands go first, so we don't mangle the entities we add after.
    text = text.replace("&", "&amp;")
    text = text.replace("<", "&lt;")
    text = text.replace(">", "&gt;")
    text = text.replace("\xa0", "&nbsp;")
    return text


def emojize(text: str) -> str:
    # Turn :shortcodes: into the emoji they name, so they get measured and
    # wrapped as the double-width characters they will end up as.
    return emoji.emojize(text)
