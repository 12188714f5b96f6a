"""
Word object model enumeration values used by word-interop-mcp.

All numeric codes are the values documented by Microsoft for the Word
automation object model (Wd* / Mso* enumerations). They are passed through
to COM unchanged; the name tables exist only to render human-readable tool
results.
"""

# WdSaveFormat
WD_FORMAT_DOCUMENT_DEFAULT = 16
WD_FORMAT_PDF = 17

# WdSaveOptions
WD_DO_NOT_SAVE_CHANGES = 0
WD_SAVE_CHANGES = -1
WD_PROMPT_TO_SAVE_CHANGES = -2

SAVE_OPTION_NAMES = {
    WD_DO_NOT_SAVE_CHANGES: "Do not save",
    WD_SAVE_CHANGES: "Save",
    WD_PROMPT_TO_SAVE_CHANGES: "Prompt",
}

# WdUnits
WD_CHARACTER = 1
WD_WORD = 2
WD_SENTENCE = 3
WD_PARAGRAPH = 4
WD_LINE = 5
WD_STORY = 6

UNIT_NAMES = {
    1: "character(s)",
    2: "word(s)",
    3: "sentence(s)",
    4: "paragraph(s)",
    5: "line(s)",
    6: "story",
    7: "screen",
    8: "section",
    9: "column",
    10: "row",
    11: "window",
    12: "cell",
}

# WdMovementType
WD_MOVE = 0
WD_EXTEND = 1

# WdCollapseDirection
WD_COLLAPSE_END = 0
WD_COLLAPSE_START = 1

# WdFindWrap
WD_FIND_CONTINUE = 1

# WdReplace
WD_REPLACE_NONE = 0
WD_REPLACE_ONE = 1
WD_REPLACE_ALL = 2

# WdUnderline
WD_UNDERLINE_NONE = 0
WD_UNDERLINE_SINGLE = 1

# Font.Bold / Font.Italic read back this value when the range is mixed
WD_UNDEFINED = 9999999

# WdParagraphAlignment
ALIGNMENT_NAMES = {
    0: "Left",
    1: "Center",
    2: "Right",
    3: "Justify",
}

# WdLineSpacing; rules at or above WD_LINE_SPACE_AT_LEAST need a LineSpacing value
WD_LINE_SPACE_AT_LEAST = 3
WD_LINE_SPACE_MULTIPLE = 5

LINE_SPACING_NAMES = {
    0: "Single",
    1: "1.5 Lines",
    2: "Double",
    3: "At Least",
    4: "Exactly",
    5: "Multiple",
}

# WdTableFormatApply bit flags, decoded into Table.AutoFormat keyword arguments
TABLE_FORMAT_APPLY_FLAGS = {
    1: "ApplyBorders",
    2: "ApplyShading",
    4: "ApplyFont",
    8: "ApplyColor",
    16: "AutoFit",
    32: "ApplyHeadingRows",
    64: "ApplyLastRow",
    128: "ApplyFirstColumn",
    256: "ApplyLastColumn",
}
DEFAULT_TABLE_FORMAT_APPLY = 1 + 2 + 4 + 8 + 16 + 32 + 64 + 128 + 256

# MsoTriState
MSO_TRUE = -1
MSO_FALSE = 0

# WdHeaderFooterIndex
WD_HEADER_FOOTER_PRIMARY = 1
WD_HEADER_FOOTER_FIRST_PAGE = 2
WD_HEADER_FOOTER_EVEN_PAGES = 3

HEADER_FOOTER_TYPE_NAMES = {
    WD_HEADER_FOOTER_PRIMARY: "Primary",
    WD_HEADER_FOOTER_FIRST_PAGE: "First Page",
    WD_HEADER_FOOTER_EVEN_PAGES: "Even Pages",
}

# WdOrientation
ORIENTATION_NAMES = {
    0: "Portrait",
    1: "Landscape",
}

# WdPaperSize (common values)
PAPER_SIZE_NAMES = {
    0: "10x14",
    1: "11x17",
    2: "Letter",
    3: "Letter Small",
    4: "Legal",
    5: "Executive",
    6: "A3",
    7: "A4",
    8: "A4 Small",
    9: "A5",
    10: "B4",
    11: "B5",
    41: "Custom",
}

# WdSelectionType
WD_SELECTION_NONE = 0

SELECTION_TYPE_NAMES = {
    0: "None",
    1: "Normal",
    2: "Column",
    3: "Row",
    4: "Block",
    5: "InlineShape",
    6: "Shape",
    7: "Frame",
}
