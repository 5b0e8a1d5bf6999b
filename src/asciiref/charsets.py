# (label, low, high) with inclusive bounds
CATEGORIES = [
    ("Control Characters (00-1F)", 0, 31),
    ("Punctuation (20-2F)", 32, 47),
    ("Digits (30-39)", 48, 57),
    ("Punctuation (3A-40)", 58, 64),
    ("Uppercase Letters (41-5A)", 65, 90),
    ("Punctuation (5B-60)", 91, 96),
    ("Lowercase Letters (61-7A)", 97, 122),
    ("Punctuation (7B-7E)", 123, 126),
    ("Control Characters (7F)", 127, 127),
]

# (code, glyph, name); the control key of 0x00-0x1F is chr(code + 64)
CONTROL = [
    (0, "NUL", "Null"),
    (1, "SOH", "Start of Heading"),
    (2, "STX", "Start of Text"),
    (3, "ETX", "End of Text"),
    (4, "EOT", "End of Transmission"),
    (5, "ENQ", "Enquiry"),
    (6, "ACK", "Acknowledgement"),
    (7, "BEL", "Bell"),
    (8, "BS", "Backspace"),
    (9, "HT", "Horizontal Tab"),
    (10, "LF", "Line Feed"),
    (11, "VT", "Vertical Tab"),
    (12, "FF", "Form Feed"),
    (13, "CR", "Carriage Return"),
    (14, "SO", "Shift Out"),
    (15, "SI", "Shift In"),
    (16, "DLE", "Data Link Escape"),
    (17, "DC1", "Device Control 1 (XON)"),
    (18, "DC2", "Device Control 2"),
    (19, "DC3", "Device Control 3 (XOFF)"),
    (20, "DC4", "Device Control 4"),
    (21, "NAK", "Negative Acknowledgement"),
    (22, "SYN", "Synchronous Idle"),
    (23, "ETB", "End of Transmission Block"),
    (24, "CAN", "Cancel"),
    (25, "EM", "End of Medium"),
    (26, "SUB", "Substitute"),
    (27, "ESC", "Escape"),
    (28, "FS", "File Separator"),
    (29, "GS", "Group Separator"),
    (30, "RS", "Record Separator"),
    (31, "US", "Unit Separator"),
]

DELETE = (127, "DEL", "Delete")
DELETE_CONTROL_KEY = "?"

ESCAPES = {
    7: r"\a",
    8: r"\b",
    9: r"\t",
    10: r"\n",
    11: r"\v",
    12: r"\f",
    13: r"\r",
}

PUNCTUATION = [
    (32, "SP", "Space"),
    (33, "!", "Exclamation Mark"),
    (34, '"', "Quotation Mark"),
    (35, "#", "Number Sign"),
    (36, "$", "Dollar Sign"),
    (37, "%", "Percent Sign"),
    (38, "&", "Ampersand"),
    (39, "'", "Apostrophe"),
    (40, "(", "Left Parenthesis"),
    (41, ")", "Right Parenthesis"),
    (42, "*", "Asterisk"),
    (43, "+", "Plus Sign"),
    (44, ",", "Comma"),
    (45, "-", "Hyphen-Minus"),
    (46, ".", "Full Stop"),
    (47, "/", "Slash"),
    (58, ":", "Colon"),
    (59, ";", "Semicolon"),
    (60, "<", "Less-Than Sign"),
    (61, "=", "Equals Sign"),
    (62, ">", "Greater-Than Sign"),
    (63, "?", "Question Mark"),
    (64, "@", "Commercial At"),
    (91, "[", "Left Square Bracket"),
    (92, "\\", "Backslash"),
    (93, "]", "Right Square Bracket"),
    (94, "^", "Circumflex Accent"),
    (95, "_", "Underscore"),
    (96, "`", "Grave Accent"),
    (123, "{", "Left Curly Bracket"),
    (124, "|", "Vertical Bar"),
    (125, "}", "Right Curly Bracket"),
    (126, "~", "Tilde"),
]

DIGIT_NAMES = ["Zero", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine"]

DIGITS = [(ord(d), d, f"Digit {DIGIT_NAMES[int(d)]}") for d in "0123456789"]

UPPERCASE = [(i, chr(i), f"Capital Letter {chr(i)}") for i in range(ord("A"), ord("Z") + 1)]

LOWERCASE = [(i, chr(i), f"Small Letter {chr(i)}") for i in range(ord("a"), ord("z") + 1)]
