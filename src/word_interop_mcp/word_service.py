"""
Word editing operations for word-interop-mcp.

WordService exposes one method per supported editing action. Each method gets
the application or active document from WordApplicationManager, performs a
short fixed sequence of property writes and method calls on the live COM
object graph, and returns nothing, a scalar, or a small record.

Error policy:
- Domain preconditions (bad index, missing document, inactive header/footer)
  are checked first and raise the specific WordAutomationError subclass
- Anything else raised by COM is wrapped in OperationError with the operation
  name; the original exception is chained
- close_document degrades to a warning, quit_word never raises

All indices are 1-based, matching the Word object model.
"""

import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional, Union

from .com_manager import WordApplicationManager
from .constants import (
    DEFAULT_TABLE_FORMAT_APPLY,
    MSO_FALSE,
    MSO_TRUE,
    TABLE_FORMAT_APPLY_FLAGS,
    WD_COLLAPSE_END,
    WD_COLLAPSE_START,
    WD_DO_NOT_SAVE_CHANGES,
    WD_EXTEND,
    WD_FIND_CONTINUE,
    WD_FORMAT_DOCUMENT_DEFAULT,
    WD_HEADER_FOOTER_EVEN_PAGES,
    WD_HEADER_FOOTER_PRIMARY,
    WD_LINE_SPACE_AT_LEAST,
    WD_MOVE,
    WD_REPLACE_ALL,
    WD_REPLACE_ONE,
    WD_SELECTION_NONE,
    WD_STORY,
    WD_UNDERLINE_NONE,
    WD_UNDERLINE_SINGLE,
)
from .errors import (
    DocumentOpenError,
    IndexOutOfRangeError,
    HeaderFooterNotFoundError,
    OperationError,
    WordAutomationError,
)
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class SelectionInfo:
    """Snapshot of the current selection."""
    text: str
    start: int
    end: int
    is_active: bool
    type: int


@contextmanager
def _operation(name: str):
    """Re-raise any non-domain failure inside the block as OperationError."""
    try:
        yield
    except WordAutomationError:
        raise
    except Exception as e:
        logger.error(
            "word_operation_failed",
            operation=name,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise OperationError(name, e) from e


def _check_index(kind: str, index: int, count: int, context: Optional[str] = None) -> None:
    if index < 1 or index > count:
        raise IndexOutOfRangeError(kind, index, count, context)


class WordService:
    """
    Operation service driving Word through its automation object model.

    Args:
        manager: The WordApplicationManager owning the Word.Application handle
    """

    def __init__(self, manager: WordApplicationManager):
        self.manager = manager

    # --- Shared lookups ---

    def get_active_document(self):
        return self.manager.get_active_document()

    def _selection(self):
        # Called inside _operation so a dead window surfaces as OperationError
        return self.manager.get_active_document().ActiveWindow.Selection

    def _table(self, doc, table_index: int):
        _check_index("Table", table_index, doc.Tables.Count)
        return doc.Tables(table_index)

    # --- Document lifecycle ---

    def create_document(self):
        """Create a new blank document and return it."""
        app = self.manager.acquire()
        with _operation("create_document"):
            doc = app.Documents.Add()
        logger.info("document_created")
        return doc

    def open_document(self, file_path: str):
        """
        Open an existing document.

        Raises:
            DocumentOpenError: If the path is not a readable file or Word
                               refuses to open it
        """
        if not os.path.isfile(file_path):
            raise DocumentOpenError(file_path, "File not found.")
        if not os.access(file_path, os.R_OK):
            raise DocumentOpenError(file_path, "File is not readable.")

        app = self.manager.acquire()
        try:
            doc = app.Documents.Open(file_path)
        except Exception as e:
            logger.error("document_open_failed", path=file_path, error=str(e), error_type=type(e).__name__)
            raise DocumentOpenError(file_path, f"Error: {e}") from e

        logger.info("document_opened", path=file_path)
        return doc

    def save_active_document(self) -> None:
        doc = self.get_active_document()
        with _operation("save_active_document"):
            doc.Save()
        logger.info("document_saved")

    def save_active_document_as(self, file_path: str, file_format: Optional[int] = None) -> None:
        """
        Save the active document to a new path.

        Args:
            file_path: Destination path
            file_format: WdSaveFormat value (default: 16, .docx)
        """
        doc = self.get_active_document()
        fmt = WD_FORMAT_DOCUMENT_DEFAULT if file_format is None else file_format
        with _operation("save_active_document_as"):
            doc.SaveAs2(file_path, fmt)
        logger.info("document_saved_as", path=file_path, file_format=fmt)

    def close_document(self, doc, save_changes: Optional[int] = None) -> None:
        """
        Close a document. Failures are logged, never raised, since the
        document may already be gone.

        Args:
            doc: Document COM object
            save_changes: WdSaveOptions value (default: 0, do not save)
        """
        option = WD_DO_NOT_SAVE_CHANGES if save_changes is None else save_changes
        try:
            doc.Close(SaveChanges=option)
            logger.info("document_closed", save_changes=option)
        except Exception as e:
            logger.warning("document_close_failed", error=str(e), error_type=type(e).__name__)

    def close_active_document(self, save_changes: Optional[int] = None) -> None:
        doc = self.get_active_document()
        self.close_document(doc, save_changes)

    def quit_word(self) -> None:
        self.manager.quit()

    # --- Text editing ---

    def insert_text(self, text: str) -> None:
        with _operation("insert_text"):
            selection = self._selection()
            selection.TypeText(text)

    def delete_text(self, count: int = 1, unit: int = 1) -> None:
        """
        Delete units relative to the selection.

        Positive count deletes forward. Negative count moves the selection
        start back by |count| units, then deletes that many units forward.
        Zero does nothing.
        """
        if count == 0:
            return
        with _operation("delete_text"):
            selection = self._selection()
            if count > 0:
                selection.Delete(unit, count)
            else:
                selection.MoveStart(unit, count)
                selection.Delete(unit, -count)

    def find_and_replace(
        self,
        find_text: str,
        replace_text: str,
        match_case: bool = False,
        match_whole_word: bool = False,
        replace_all: bool = True,
    ) -> bool:
        """
        Find and replace across the whole document content.

        Returns:
            True if a match was found and replaced (all matches when
            replace_all, otherwise only the first)
        """
        doc = self.get_active_document()
        with _operation("find_and_replace"):
            find = doc.Content.Find
            find.ClearFormatting()
            find.Replacement.ClearFormatting()

            find.Text = find_text
            find.Replacement.Text = replace_text
            find.Forward = True
            find.Wrap = WD_FIND_CONTINUE
            find.Format = False
            find.MatchCase = match_case
            find.MatchWholeWord = match_whole_word
            find.MatchWildcards = False
            find.MatchSoundsLike = False
            find.MatchAllWordForms = False

            found = find.Execute(Replace=WD_REPLACE_ALL if replace_all else WD_REPLACE_ONE)

        found = bool(found)
        logger.info("find_and_replace_executed", found=found, replace_all=replace_all)
        return found

    # --- Character formatting ---

    def _toggle_font_flag(self, operation: str, attribute: str) -> bool:
        # Mixed ranges report WD_UNDEFINED; any non-zero value counts as on
        with _operation(operation):
            selection = self._selection()
            font = selection.Font
            current = getattr(font, attribute)
            new_value = not bool(current)
            setattr(font, attribute, new_value)
        return new_value

    def toggle_bold(self) -> bool:
        """Flip bold on the selection. Returns the new state."""
        return self._toggle_font_flag("toggle_bold", "Bold")

    def toggle_italic(self) -> bool:
        """Flip italic on the selection. Returns the new state."""
        return self._toggle_font_flag("toggle_italic", "Italic")

    def toggle_underline(self, underline_style: int = WD_UNDERLINE_SINGLE) -> int:
        """
        Apply underline_style, or clear underline if it is already applied.

        Returns:
            The WdUnderline value now in effect
        """
        with _operation("toggle_underline"):
            selection = self._selection()
            font = selection.Font
            if font.Underline == underline_style:
                font.Underline = WD_UNDERLINE_NONE
            else:
                font.Underline = underline_style
            return font.Underline

    # --- Paragraph formatting ---

    def _set_paragraph_format(self, operation: str, attribute: str, value) -> None:
        with _operation(operation):
            selection = self._selection()
            setattr(selection.ParagraphFormat, attribute, value)

    def set_paragraph_alignment(self, alignment: int) -> None:
        self._set_paragraph_format("set_paragraph_alignment", "Alignment", alignment)

    def set_paragraph_left_indent(self, indent_points: float) -> None:
        self._set_paragraph_format("set_paragraph_left_indent", "LeftIndent", indent_points)

    def set_paragraph_right_indent(self, indent_points: float) -> None:
        self._set_paragraph_format("set_paragraph_right_indent", "RightIndent", indent_points)

    def set_paragraph_first_line_indent(self, indent_points: float) -> None:
        self._set_paragraph_format("set_paragraph_first_line_indent", "FirstLineIndent", indent_points)

    def set_paragraph_space_before(self, space_points: float) -> None:
        self._set_paragraph_format("set_paragraph_space_before", "SpaceBefore", space_points)

    def set_paragraph_space_after(self, space_points: float) -> None:
        self._set_paragraph_format("set_paragraph_space_after", "SpaceAfter", space_points)

    def set_paragraph_line_spacing(self, rule: int, value: Optional[float] = None) -> None:
        """
        Set the line spacing rule. LineSpacing is only written for the
        AtLeast/Exactly/Multiple rules (3..5) and only when a value is given.
        """
        with _operation("set_paragraph_line_spacing"):
            selection = self._selection()
            paragraph_format = selection.ParagraphFormat
            paragraph_format.LineSpacingRule = rule
            if value is not None and rule >= WD_LINE_SPACE_AT_LEAST:
                paragraph_format.LineSpacing = value

    # --- Tables ---

    def add_table(
        self,
        num_rows: int,
        num_cols: int,
        default_table_behavior: Optional[int] = None,
        auto_fit_behavior: Optional[int] = None,
    ):
        """Add a table at the selection and return it."""
        behavior = {}
        if default_table_behavior is not None:
            behavior["DefaultTableBehavior"] = default_table_behavior
        if auto_fit_behavior is not None:
            behavior["AutoFitBehavior"] = auto_fit_behavior

        with _operation("add_table"):
            selection = self._selection()
            table = selection.Tables.Add(selection.Range, num_rows, num_cols, **behavior)
        logger.info("table_added", rows=num_rows, cols=num_cols)
        return table

    def get_table_cell(self, table_index: int, row_index: int, col_index: int):
        doc = self.get_active_document()
        with _operation("get_table_cell"):
            table = self._table(doc, table_index)
            _check_index("Row", row_index, table.Rows.Count, f"for table {table_index}")
            _check_index("Column", col_index, table.Columns.Count, f"for table {table_index}")
            return table.Cell(row_index, col_index)

    def set_table_cell_text(self, table_index: int, row_index: int, col_index: int, text: str) -> None:
        cell = self.get_table_cell(table_index, row_index, col_index)
        with _operation("set_table_cell_text"):
            cell.Range.Text = text

    def insert_table_row(self, table_index: int, before_row_index: Optional[int] = None) -> bool:
        """
        Insert a row. Omitted or count+1 before_row_index appends at the end.

        Returns:
            True if the row was appended, False if inserted before an existing row
        """
        doc = self.get_active_document()
        with _operation("insert_table_row"):
            table = self._table(doc, table_index)
            rows = table.Rows
            if before_row_index is not None:
                _check_index("Row", before_row_index, rows.Count + 1, "for insertion")
            if before_row_index is None or before_row_index > rows.Count:
                rows.Add()
                return True
            rows.Add(BeforeRow=rows(before_row_index))
            return False

    def insert_table_column(self, table_index: int, before_col_index: Optional[int] = None) -> bool:
        """
        Insert a column. Omitted or count+1 before_col_index appends at the right end.

        Returns:
            True if the column was appended, False if inserted before an existing column
        """
        doc = self.get_active_document()
        with _operation("insert_table_column"):
            table = self._table(doc, table_index)
            columns = table.Columns
            if before_col_index is not None:
                _check_index("Column", before_col_index, columns.Count + 1, "for insertion")
            if before_col_index is None or before_col_index > columns.Count:
                columns.Add()
                return True
            columns.Add(BeforeColumn=columns(before_col_index))
            return False

    def apply_table_autoformat(
        self,
        table_index: int,
        format_name: Union[str, int],
        apply_flags: Optional[int] = None,
    ) -> None:
        """
        Apply a table style name or WdTableFormat value.

        Args:
            apply_flags: WdTableFormatApply bitmask (default: 511, all flags)
        """
        flags = DEFAULT_TABLE_FORMAT_APPLY if apply_flags is None else apply_flags
        doc = self.get_active_document()
        with _operation("apply_table_autoformat"):
            table = self._table(doc, table_index)
            options = {
                keyword: bool(flags & bit)
                for bit, keyword in TABLE_FORMAT_APPLY_FLAGS.items()
            }
            table.AutoFormat(Format=format_name, **options)

    # --- Images ---

    def insert_picture(self, file_path: str, link_to_file: bool = False, save_with_document: bool = True):
        """Insert an inline picture at the selection and return the InlineShape."""
        with _operation("insert_picture"):
            selection = self._selection()
            shape = selection.InlineShapes.AddPicture(
                file_path, link_to_file, save_with_document, selection.Range
            )
        logger.info("picture_inserted", path=file_path, linked=link_to_file)
        return shape

    def set_inline_picture_size(
        self,
        shape_index: int,
        height_points: float,
        width_points: float,
        lock_aspect_ratio: bool = True,
    ) -> None:
        """
        Resize an inline picture.

        With both dimensions positive and the aspect ratio locked, only the
        dimension with the larger requested/original ratio is written and Word
        adjusts the other. With one positive dimension only that one is
        written. With none, nothing changes and Word is not touched.

        A shape reporting a zero original dimension has no ratio to compare,
        so both requested dimensions are written.
        """
        if height_points <= 0 and width_points <= 0:
            return

        doc = self.get_active_document()
        with _operation("set_inline_picture_size"):
            _check_index("InlineShape", shape_index, doc.InlineShapes.Count)
            shape = doc.InlineShapes(shape_index)

            original_height = shape.Height
            original_width = shape.Width
            shape.LockAspectRatio = MSO_TRUE if lock_aspect_ratio else MSO_FALSE

            if height_points > 0 and width_points > 0:
                if lock_aspect_ratio and original_height > 0 and original_width > 0:
                    if width_points / original_width > height_points / original_height:
                        shape.Width = width_points
                    else:
                        shape.Height = height_points
                else:
                    shape.Height = height_points
                    shape.Width = width_points
            elif height_points > 0:
                shape.Height = height_points
            elif width_points > 0:
                shape.Width = width_points

    # --- Headers and footers ---

    def get_header_footer(self, section_index: int, header_footer_type: int, is_header: bool):
        """
        Resolve a HeaderFooter object.

        Args:
            section_index: 1-based section index
            header_footer_type: WdHeaderFooterIndex (1=Primary, 2=First Page, 3=Even Pages)
            is_header: True for Headers, False for Footers

        Raises:
            IndexOutOfRangeError: Bad section index or type
            HeaderFooterNotFoundError: The variant is not active for the section
        """
        doc = self.get_active_document()
        with _operation("get_header_footer"):
            _check_index("Section", section_index, doc.Sections.Count)
            if header_footer_type < WD_HEADER_FOOTER_PRIMARY or header_footer_type > WD_HEADER_FOOTER_EVEN_PAGES:
                raise IndexOutOfRangeError(
                    "Header/footer type", header_footer_type, WD_HEADER_FOOTER_EVEN_PAGES
                )
            section = doc.Sections(section_index)
            collection = section.Headers if is_header else section.Footers
            header_footer = collection(header_footer_type)
            if header_footer is None or not header_footer.Exists:
                raise HeaderFooterNotFoundError(is_header, header_footer_type, section_index)
            return header_footer

    def set_header_footer_text(self, section_index: int, header_footer_type: int, is_header: bool, text: str) -> None:
        header_footer = self.get_header_footer(section_index, header_footer_type, is_header)
        with _operation("set_header_footer_text"):
            header_footer.Range.Text = text

    def get_header_footer_text(self, section_index: int, header_footer_type: int, is_header: bool) -> str:
        header_footer = self.get_header_footer(section_index, header_footer_type, is_header)
        with _operation("get_header_footer_text"):
            return header_footer.Range.Text

    # --- Page setup ---

    def set_page_margins(self, top: float, bottom: float, left: float, right: float) -> None:
        doc = self.get_active_document()
        with _operation("set_page_margins"):
            page_setup = doc.PageSetup
            page_setup.TopMargin = top
            page_setup.BottomMargin = bottom
            page_setup.LeftMargin = left
            page_setup.RightMargin = right

    def set_page_orientation(self, orientation: int) -> None:
        doc = self.get_active_document()
        with _operation("set_page_orientation"):
            doc.PageSetup.Orientation = orientation

    def set_paper_size(self, paper_size: int) -> None:
        doc = self.get_active_document()
        with _operation("set_paper_size"):
            doc.PageSetup.PaperSize = paper_size

    # --- Cursor and selection ---

    def move_cursor_to_start(self) -> None:
        with _operation("move_cursor_to_start"):
            selection = self._selection()
            selection.HomeKey(WD_STORY)

    def move_cursor_to_end(self) -> None:
        with _operation("move_cursor_to_end"):
            selection = self._selection()
            selection.EndKey(WD_STORY)

    def move_cursor(self, unit: int, count: int, extend: bool = False) -> None:
        with _operation("move_cursor"):
            selection = self._selection()
            selection.MoveRight(unit, count, WD_EXTEND if extend else WD_MOVE)

    def select_all(self) -> None:
        with _operation("select_all"):
            selection = self._selection()
            selection.WholeStory()

    def select_paragraph(self, paragraph_index: int) -> None:
        doc = self.get_active_document()
        with _operation("select_paragraph"):
            _check_index("Paragraph", paragraph_index, doc.Paragraphs.Count)
            doc.Paragraphs(paragraph_index).Range.Select()

    def collapse_selection(self, to_start: bool = True) -> None:
        with _operation("collapse_selection"):
            selection = self._selection()
            selection.Collapse(WD_COLLAPSE_START if to_start else WD_COLLAPSE_END)

    def get_selection_text(self) -> str:
        with _operation("get_selection_text"):
            selection = self._selection()
            return selection.Text

    def get_selection_info(self) -> SelectionInfo:
        with _operation("get_selection_info"):
            selection = self._selection()
            selection_type = selection.Type
            return SelectionInfo(
                text=selection.Text,
                start=selection.Start,
                end=selection.End,
                is_active=selection_type != WD_SELECTION_NONE,
                type=selection_type,
            )
