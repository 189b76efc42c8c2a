"""Menus and interactive prompts."""

from __future__ import annotations

import time
from enum import IntEnum

from .data import StateRegistry
from .helpers import Console, format_header, format_row

SPINNER = "|/-\\"
SPINNER_DELAY = 0.1
NAME_SIZE = 50


class Language(IntEnum):
    ENGLISH = 1
    MALAY = 2


def _pick(lang: int, english: str, malay: str) -> str:
    return english if lang == Language.ENGLISH else malay


def print_welcome(console: Console, lang: int) -> None:
    if lang == Language.ENGLISH:
        console.write("\033[1;34mWelcome to Malaysian States Manager!\033[0m\n")
        console.write("Manage 13 states and 3 federal territories.\n")
    else:
        console.write("\033[1;34mSelamat datang ke Pengurusan Negeri & Wilayah Malaysia!\033[0m\n")
        console.write("Urus 13 negeri dan 3 wilayah persekutuan.\n")


def animate_loading(console: Console, msg: str, delay: float = SPINNER_DELAY) -> None:
    """Show a short spinner after msg."""
    console.write(f"{msg} ")
    for i in range(8):
        console.write(f"\b{SPINNER[i % len(SPINNER)]}")
        time.sleep(delay)
    console.write("\b \n")


_MENU_EN = (
    "\n\033[1;33mMain Menu (Enter choice):\033[0m\n"
    "1. Display all records\n"
    "2. Sort records\n"
    "3. Insert a record\n"
    "4. Delete a record\n"
    "5. Search / Quick Query\n"
    "6. Generate report (CSV)\n"
    "0. Exit\n"
    "Your Choice: "
)
_MENU_MS = (
    "\n\033[1;33mMenu Utama (Pilih):\033[0m\n"
    "1. Papar semua rekod\n"
    "2. Susun rekod\n"
    "3. Masukkan rekod\n"
    "4. Padam rekod\n"
    "5. Cari / Soal Segera\n"
    "6. Hasilkan laporan (CSV)\n"
    "0. Keluar\n"
    "Pilihan anda: "
)


def display_menu(console: Console, lang: int) -> None:
    console.write(_pick(lang, _MENU_EN, _MENU_MS))


def display_all(console: Console, registry: StateRegistry) -> None:
    """Print every record as a coloured table."""
    console.write("\n" + format_header())
    for state in registry:
        console.write(format_row(state))


def prompt_sort(console: Console, registry: StateRegistry, lang: int) -> None:
    console.write(_pick(
        lang,
        "Sort by:\n1. Name\n2. Creation Year\n3. Area\n4. Population\n0. Back\nYour Choice: ",
        "Susun mengikut:\n1. Nama\n2. Tahun Penubuhan\n3. Kawasan\n4. Populasi\n0. Kembali\nPilihan anda: ",
    ))
    field = console.read_int_in_range(0, 4)
    if field == 0:
        return
    console.write(_pick(
        lang,
        "1. Ascending\n2. Descending\nYour Choice: ",
        "1. Menaik\n2. Menurun\nPilihan anda: ",
    ))
    order = console.read_int_in_range(1, 2)
    animate_loading(console, "Sorting")
    registry.sort(field, order == 1)
    display_all(console, registry)
    console.write(_pick(lang, "Sorted successfully.\n", "Susunan selesai.\n"))


def prompt_insert(console: Console, registry: StateRegistry, lang: int) -> None:
    console.write(_pick(
        lang,
        "Enter state name (0 to cancel): ",
        "Masukkan nama negeri (0 untuk batalkan): ",
    ))
    name = console.read_string("", NAME_SIZE)
    if name == "0":
        return
    console.write(_pick(lang, "Enter creation year: ", "Masukkan tahun penubuhan: "))
    year = console.read_int_in_range(1000, 3000)
    area = console.read_float(_pick(lang, "Enter area (km2): ", "Masukkan kawasan (km2): "))
    population = console.read_int(_pick(lang, "Enter population: ", "Masukkan populasi: "))
    registry.insert(name, year, area, population)
    console.write(_pick(lang, "Record inserted.\n", "Rekod ditambah.\n"))


def prompt_delete(console: Console, registry: StateRegistry, lang: int) -> None:
    console.write(_pick(
        lang,
        "Enter state name to delete (0 to cancel): ",
        "Masukkan nama negeri untuk dipadam (0 untuk batalkan): ",
    ))
    name = console.read_string("", NAME_SIZE)
    if name == "0":
        return
    if registry.delete(name):
        console.write(_pick(lang, "Record deleted.\n", "Rekod dipadam.\n"))
    else:
        console.write(_pick(lang, "Record not found.\n", "Rekod tidak dijumpai.\n"))


def prompt_search(console: Console, registry: StateRegistry, lang: int) -> None:
    console.write(_pick(
        lang,
        "Enter state name to search (0 to cancel): ",
        "Masukkan nama negeri untuk cari (0 untuk batalkan): ",
    ))
    name = console.read_string("", NAME_SIZE)
    if name == "0":
        return
    found = registry.search(name)
    if found is None:
        console.write(_pick(lang, "Record not found.\n", "Rekod tidak dijumpai.\n"))
        return
    console.write(_pick(lang, "Record found:\n", "Rekod dijumpai:\n"))
    console.write(format_header())
    console.write(format_row(found))