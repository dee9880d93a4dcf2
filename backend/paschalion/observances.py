"""Movable observances expressed as fixed day offsets from Easter."""

from types import MappingProxyType
from typing import NamedTuple


class Observance(NamedTuple):
    key: str
    label: str
    offset: int
    greek: str = ""  # traditional name, where one is in common use


# Ordered by offset. easter_friday and life_giving_spring share +5.
OBSERVANCES = (
    Observance("publican", "Publican and Pharisee", -70, "Τελώνου και Φαρισαίου"),
    Observance("prodigal_son", "Prodigal Son", -63),
    Observance("shrove_thursday", "Shrove Thursday", -59, "Τσικνοπέμπτη"),
    Observance("all_souls_a", "All Souls (A)", -57, "Ψυχοσάββατον Α'"),
    Observance("carnival", "Carnival", -56, "Αποκριά"),
    Observance("cheese_sunday", "Cheese Sunday", -49, "Κυριακή της Τυροφάγου"),
    Observance("shrove_monday", "Shrove Monday", -48, "Καθαρά Δευτέρα"),
    Observance("saint_theodore", "Saint Theodore", -43),
    Observance("sunday_of_orthodoxy", "Sunday of Orthodoxy", -42),
    Observance("gregory_palamas", "Gregory Palamas", -35),
    Observance("lazarus_saturday", "Lazarus Saturday", -8),
    Observance("palm_sunday", "Palm Sunday", -7, "Κυριακή των Βαίων"),
    Observance("holy_monday", "Holy Monday", -6, "Μεγάλη Δευτέρα"),
    Observance("holy_tuesday", "Holy Tuesday", -5, "Μεγάλη Τρίτη"),
    Observance("holy_wednesday", "Holy Wednesday", -4, "Μεγάλη Τετάρτη"),
    Observance("holy_thursday", "Holy Thursday", -3, "Μεγάλη Πέμπτη"),
    Observance("holy_friday", "Holy Friday", -2, "Μεγάλη Παρασκευή"),
    Observance("holy_saturday", "Holy Saturday", -1, "Μεγάλο Σάββατο"),
    Observance("easter_monday", "Easter Monday", 1, "Δευτέρα του Πάσχα"),
    Observance("easter_tuesday", "Easter Tuesday", 2, "Τρίτη του Πάσχα"),
    Observance("easter_wednesday", "Easter Wednesday", 3, "Τετάρτη του Πάσχα"),
    Observance("easter_thursday", "Easter Thursday", 4, "Πέμπτη του Πάσχα"),
    Observance("easter_friday", "Easter Friday", 5, "Παρασκευή του Πάσχα"),
    Observance("life_giving_spring", "Life-Giving Spring", 5, "Ζωοδόχου Πηγής"),
    Observance("easter_saturday", "Easter Saturday", 6, "Σάββατο του Πάσχα"),
    Observance("thomas_sunday", "Thomas Sunday", 7, "Κυριακή του Θωμά"),
    Observance("myrrhbearers", "Myrrhbearers", 14, "Μυροφόρα"),
    Observance("paralytic", "Paralytic", 21, "Βηθεσδά"),
    Observance("ascension", "Ascension", 39, "Ανάληψη"),
    Observance("all_souls_b", "All Souls (B)", 48, "Ψυχοσάββατον Β'"),
    Observance("pentecost", "Pentecost", 49, "Πεντηκοστή"),
    Observance("holy_spirit_day", "Holy Spirit Day", 50, "Αγίου Πνεύματος"),
    Observance("all_saints", "All Saints", 56, "Αγίων Πάντων"),
)

OBSERVANCE_OFFSETS = MappingProxyType({o.key: o.offset for o in OBSERVANCES})

# Dates not expressible as a fixed offset
SPECIAL_LABELS = MappingProxyType({
    "easter": "Easter",
    "forefathers_sunday": "Sunday of the Forefathers",
    "saint_george": "Saint George",
    "mark_the_evangelist": "Mark the Evangelist",
    "saint_cloe": "Saint Cloe",
})

LABELS = MappingProxyType({
    **{o.key: o.label for o in OBSERVANCES},
    **SPECIAL_LABELS,
})

GREEK_LABELS = MappingProxyType({
    **{o.key: o.greek for o in OBSERVANCES},
    "easter": "Πάσχα",
    "forefathers_sunday": "Των Προπατόρων",
    "saint_george": "",
    "mark_the_evangelist": "",
    "saint_cloe": "",
})
