"""
Discovery and loading of the bundled BTPS reference table.

This module provides functions to:

- Locate the ``btps_factors.json`` file shipped with pyBTPS
- Load its content as a plain dictionary

The file is resolved inside the :mod:`pybtps.data` package using
:mod:`importlib.resources`, so it works from an installed package as well as
from a source checkout.
"""

import json
from typing import Dict

DEFAULT_TABLE_FILENAME = "btps_factors.json"


def get_default_table_path(filename: str = DEFAULT_TABLE_FILENAME) -> str:
    """
    Locate a reference table file within :mod:`pybtps.data`.

    :param filename: The name of the .json file to locate.
    :type filename: str

    :returns: Path to the located file.
    :rtype: str

    :raises FileNotFoundError: If the file is not part of the data package.
    """
    from importlib.resources import files
    path = files("pybtps.data").joinpath(filename)
    if not path.is_file():
        raise FileNotFoundError(f"Cannot find reference table '{filename}'")
    return str(path)


def load_btps_table(filename: str = DEFAULT_TABLE_FILENAME) -> Dict:
    """
    Load the BTPS reference table from a JSON file.

    The returned dictionary holds the ``temperature`` and ``factor`` lists and an
    optional ``source`` description.

    :param filename: The name of the .json file within :mod:`pybtps.data`.
    :type filename: str

    :returns: Dictionary with the raw reference table.
    :rtype: dict

    :raises FileNotFoundError: If the file cannot be found.
    :raises json.JSONDecodeError: If the file content is not valid JSON.
    """
    path = get_default_table_path(filename)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
