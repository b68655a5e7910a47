from typing import List, Optional, Tuple

FIELD_DELIMITER = ","

ZONE_FIELD_INDEX = 1
# Layout a 3 colonne (id, zona, datetime) prima, layout a 6 colonne come fallback.
DATETIME_FIELD_CANDIDATES = (2, 3)

_ASCII_WHITESPACE = " \t\n\r\x0b\x0c"
_ASCII_DIGITS = "0123456789"


def _is_space(char: str) -> bool:
    return char in _ASCII_WHITESPACE


def _is_digit(char: str) -> bool:
    return char != "" and char in _ASCII_DIGITS


def trim_field(value: str) -> str:
    return value.strip(_ASCII_WHITESPACE)


def parse_hour_from_datetime(text: str) -> Optional[int]:
    """
    Estrae l'ora (0-23) da una stringa del tipo "<data> HH:MM".

    Il formato della data non viene validato: servono solo uno spazio tra data
    e orario e i due punti tra ora e minuti. Il minuto deve essere di due cifre
    tra 00 e 59 ma il suo valore viene scartato. L'ora può essere di una o due
    cifre, eventualmente separate da spazi ("9:30", "09:30", "0 9:30").
    """
    value = trim_field(text)
    if not value:
        return None

    separator = value.find(" ")
    if separator == -1:
        return None

    colon = value.find(":", separator + 1)
    if colon == -1:
        return None

    minute_digits = value[colon + 1:colon + 3]
    if len(minute_digits) != 2 or not all(_is_digit(c) for c in minute_digits):
        return None
    if int(minute_digits) > 59:
        return None

    # La scansione all'indietro non oltrepassa lo spazio che separa data e orario:
    # senza questo limite "2023-01-01 9:30" darebbe 19, usando l'ultima cifra
    # della data come decina dell'ora.
    position = colon - 1
    while position > separator and _is_space(value[position]):
        position -= 1
    if position <= separator or not _is_digit(value[position]):
        return None
    hour = int(value[position])

    position -= 1
    while position > separator and _is_space(value[position]):
        position -= 1
    if position > separator and _is_digit(value[position]):
        hour = int(value[position]) * 10 + hour

    if hour > 23:
        return None
    return hour


def split_fields(line: str) -> List[str]:
    return line.split(FIELD_DELIMITER)


def parse_trip_line(line: str) -> Optional[Tuple[str, int]]:
    """
    Restituisce (zona, ora) per una riga valida, None se la riga va scartata.

    Nessuna gestione speciale dell'intestazione: una riga di header non contiene
    un orario riconoscibile e viene scartata come qualunque riga malformata.
    """
    fields = split_fields(line)
    if len(fields) <= ZONE_FIELD_INDEX:
        return None

    zone = trim_field(fields[ZONE_FIELD_INDEX])
    if not zone:
        return None

    for field_index in DATETIME_FIELD_CANDIDATES:
        if field_index >= len(fields):
            break
        hour = parse_hour_from_datetime(fields[field_index])
        if hour is not None:
            return zone, hour

    return None
