import os


def search_path_dirs():
    """Directories of $PATH, in listed order."""
    return os.getenv("PATH", "").split(os.pathsep)


def resolve(name):
    """
    Find an executable candidate for a program name.
    Order: the name as given, then cwd/name, then each $PATH directory.
    Returns: path string or None
    """
    if not name:
        return None

    if os.path.exists(name):
        return name

    try:
        candidate = os.path.join(os.getcwd(), name)
    except OSError:
        candidate = None
    if candidate and os.path.exists(candidate):
        return candidate

    # Only bare filenames are looked up on the search path
    if os.sep in name:
        return None

    for directory in search_path_dirs():
        candidate = os.path.join(directory, name)
        if os.path.exists(candidate):
            return candidate

    return None
