"""Load ABIs"""

from __future__ import annotations

import json
import logging
import os

DEFAULT_ABI_DIR = os.path.dirname(os.path.abspath(__file__))


def load_all_abis(abi_folder: str | None = None) -> dict[str, list]:
    """Load all ABI JSONs given an abi_folder.

    Arguments
    ---------
    abi_folder: str, optional
        The local directory that contains all abi json. Defaults to the ABIs bundled with the package.

    Returns
    -------
    dict[str, list]
        A dictionary with keys for each abi filename and value is the "abi" field of the JSON decoded file
    """
    if abi_folder is None:
        abi_folder = DEFAULT_ABI_DIR
    abis = {}
    loaded = []
    for abi_file in _collect_files(abi_folder):
        file_name = os.path.splitext(os.path.basename(abi_file))[0]
        try:
            abis[file_name] = load_abi_from_file(abi_file)
        except AssertionError as err:
            logging.debug("JSON file %s did not contain an ABI.\nError: %s", abi_file, err)
            continue
        loaded.append(abi_file)
    logging.debug("Loaded ABI files %s", str(loaded))
    return abis


def load_abi_from_file(file_name: str) -> list:
    """Load an ABI JSON given an ABI file.

    Arguments
    ---------
    file_name: str
        The path to a JSON file with an "abi" field.

    Returns
    -------
    list
        The "abi" field of the JSON decoded file
    """
    with open(file_name, mode="r", encoding="UTF-8") as file:
        data = json.load(file)
    if "abi" in data:
        return data["abi"]
    raise AssertionError(f"ABI for {file_name=} must contain an 'abi' field")


def _collect_files(folder_path: str, extension: str = ".json") -> list[str]:
    """Load all files with the given extension into a list"""
    collected_files = []
    for root, _, files in os.walk(folder_path):
        for file in files:
            if file.endswith(extension):
                collected_files.append(os.path.join(root, file))
    return sorted(collected_files)
