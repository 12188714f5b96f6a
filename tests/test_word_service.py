import pytest

from word_interop_mcp.errors import (
    DocumentOpenError,
    HeaderFooterNotFoundError,
    IndexOutOfRangeError,
    NoActiveDocumentError,
    OperationError,
)

from .fakes import FakeDocument, FakeInlineShape, FakeTable


class TestDocumentLifecycle:
    def test_create_document_becomes_active(self, service):
        doc = service.create_document()
        assert service.get_active_document() is doc

    def test_open_missing_file(self, service, tmp_path):
        missing = str(tmp_path / "missing.docx")
        with pytest.raises(DocumentOpenError, match="File not found."):
            service.open_document(missing)

    def test_open_existing_file(self, service, app, tmp_path):
        path = tmp_path / "report.docx"
        path.write_bytes(b"PK")
        doc = FakeDocument(name="report.docx")
        app.files[str(path)] = doc

        assert service.open_document(str(path)) is doc
        assert service.get_active_document() is doc

    def test_open_rejected_by_word(self, service, app, tmp_path):
        path = tmp_path / "corrupt.docx"
        path.write_bytes(b"garbage")
        with pytest.raises(DocumentOpenError, match="Word could not open"):
            service.open_document(str(path))

    def test_save_requires_active_document(self, service):
        with pytest.raises(NoActiveDocumentError):
            service.save_active_document()

    def test_save(self, service, document):
        service.save_active_document()
        assert document.save_count == 1

    def test_save_as_defaults_to_docx(self, service, document, tmp_path):
        path = str(tmp_path / "out.docx")
        service.save_active_document_as(path)
        assert document.saved_as == (path, 16)

    def test_save_as_pdf(self, service, document, tmp_path):
        path = str(tmp_path / "out.pdf")
        service.save_active_document_as(path, 17)
        assert document.saved_as == (path, 17)

    def test_close_defaults_to_discard(self, service, document):
        service.close_active_document()
        assert document.closed_with == 0

    def test_close_failure_is_not_raised(self, service, document):
        def broken_close(SaveChanges=0):
            raise RuntimeError("document already closed")

        document.Close = broken_close
        service.close_active_document(-1)

    def test_save_as_then_reopen_round_trips_text(self, service, tmp_path):
        service.create_document()
        service.insert_text("Round trip text")
        path = str(tmp_path / "round.docx")
        service.save_active_document_as(path)
        service.close_active_document()

        reopened = service.open_document(path)
        service.select_all()
        assert service.get_active_document() is reopened
        assert service.get_selection_text() == "Round trip text"

    def test_quit_word(self, service, app, manager):
        service.quit_word()
        assert app.quit_with == 0
        assert not manager.has_handle


class TestDeleteText:
    def test_forward_delete(self, service, document, selection):
        selection.Start = selection.End = 5
        service.delete_text(3)
        assert document.text == "Hellorld"
        assert selection.calls == [("Delete", 1, 3)]

    def test_backward_delete_removes_units_before_cursor(self, service, document, selection):
        selection.Start = selection.End = 5
        service.delete_text(-3)
        assert document.text == "He World"
        assert selection.calls == [("MoveStart", 1, -3), ("Delete", 1, 3)]

    def test_zero_count_does_nothing(self, service, document, selection):
        service.delete_text(0)
        assert document.text == "Hello World"
        assert selection.calls == []

    def test_zero_count_does_not_need_a_document(self, service):
        service.delete_text(0)

    def test_unit_is_passed_through(self, service, document, selection):
        service.delete_text(2, unit=2)
        assert selection.calls == [("Delete", 2, 2)]


class TestFindAndReplace:
    def test_replace_all(self, service, document):
        document.text = "cat and cat"
        assert service.find_and_replace("cat", "dog") is True
        assert document.text == "dog and dog"
        assert document.Content.Find.executed_with == 2

    def test_replace_all_covers_every_occurrence(self, service, document):
        document.text = "cat cat cat"
        assert service.find_and_replace("cat", "dog", replace_all=True) is True
        assert document.text == "dog dog dog"

    def test_replace_first_only(self, service, document):
        document.text = "cat and cat"
        assert service.find_and_replace("cat", "dog", replace_all=False) is True
        assert document.text == "dog and cat"
        assert document.Content.Find.executed_with == 1

    def test_not_found(self, service, document):
        assert service.find_and_replace("zebra", "horse") is False
        assert document.text == "Hello World"

    def test_match_case(self, service, document):
        assert service.find_and_replace("hello", "Bye", match_case=True) is False
        assert service.find_and_replace("hello", "Bye") is True
        assert document.text == "Bye World"

    def test_clears_formatting_and_disables_patterns(self, service, document):
        service.find_and_replace("World", "There")
        find = document.Content.Find
        assert find.cleared and find.Replacement.cleared
        assert find.Wrap == 1
        assert find.MatchWildcards is False
        assert find.MatchSoundsLike is False
        assert find.MatchAllWordForms is False


class TestCharacterFormatting:
    def test_toggle_bold_twice_restores(self, service, selection):
        assert service.toggle_bold() is True
        assert selection.Font.Bold
        assert service.toggle_bold() is False
        assert not selection.Font.Bold

    def test_mixed_state_counts_as_on(self, service, selection):
        selection.Font.Italic = 9999999
        assert service.toggle_italic() is False
        assert not selection.Font.Italic

    def test_underline_applies_then_clears(self, service, selection):
        assert service.toggle_underline() == 1
        assert service.toggle_underline() == 0

    def test_underline_switches_style(self, service, selection):
        selection.Font.Underline = 1
        assert service.toggle_underline(3) == 3


class TestParagraphFormatting:
    def test_simple_properties(self, service, selection):
        service.set_paragraph_alignment(1)
        service.set_paragraph_left_indent(36)
        service.set_paragraph_right_indent(18)
        service.set_paragraph_first_line_indent(-18)
        service.set_paragraph_space_before(6)
        service.set_paragraph_space_after(12)

        fmt = selection.ParagraphFormat
        assert fmt.Alignment == 1
        assert fmt.LeftIndent == 36
        assert fmt.RightIndent == 18
        assert fmt.FirstLineIndent == -18
        assert fmt.SpaceBefore == 6
        assert fmt.SpaceAfter == 12

    def test_line_spacing_value_ignored_for_fixed_rules(self, service, selection):
        service.set_paragraph_line_spacing(2, 24)
        assert selection.ParagraphFormat.LineSpacingRule == 2
        assert not hasattr(selection.ParagraphFormat, "LineSpacing")

    def test_line_spacing_multiple(self, service, selection):
        service.set_paragraph_line_spacing(5, 1.15)
        assert selection.ParagraphFormat.LineSpacing == 1.15


class TestTables:
    def test_add_table(self, service, document):
        table = service.add_table(3, 4)
        assert document.Tables.Count == 1
        assert table.Rows.Count == 3 and table.Columns.Count == 4
        assert document.Tables.add_calls[0][3] == {}

    def test_add_table_with_behaviors(self, service, document):
        service.add_table(2, 2, default_table_behavior=1, auto_fit_behavior=2)
        assert document.Tables.add_calls[0][3] == {"DefaultTableBehavior": 1, "AutoFitBehavior": 2}

    def test_set_cell_text(self, service, document):
        document.Tables.items.append(FakeTable(2, 2))
        service.set_table_cell_text(1, 2, 2, "x")
        assert document.Tables(1).cells[(2, 2)].Range.Text == "x"

    def test_table_index_out_of_range(self, service, document):
        document.Tables.items.append(FakeTable())
        with pytest.raises(IndexOutOfRangeError, match=r"Table index 2 is out of bounds \(valid range: 1-1\)"):
            service.set_table_cell_text(2, 1, 1, "x")

    def test_row_index_out_of_range(self, service, document):
        document.Tables.items.append(FakeTable(2, 2))
        with pytest.raises(IndexOutOfRangeError, match="Row index 3 is out of bounds for table 1"):
            service.get_table_cell(1, 3, 1)

    def test_insert_row_at_end_by_default(self, service, document):
        table = FakeTable(2, 2)
        document.Tables.items.append(table)
        service.insert_table_row(1)
        assert table.Rows.Count == 3
        assert table.Rows.add_calls == [None]

    def test_insert_row_before(self, service, document):
        table = FakeTable(2, 2)
        document.Tables.items.append(table)
        first_row = table.Rows(1)
        service.insert_table_row(1, 1)
        assert table.Rows.add_calls == [first_row]
        assert table.Rows(2) is first_row

    def test_insert_row_count_plus_one_appends(self, service, document):
        table = FakeTable(2, 2)
        document.Tables.items.append(table)
        assert service.insert_table_row(1, 3) is True
        assert table.Rows.add_calls == [None]
        assert table.Rows.Count == 3

    def test_insert_row_beyond_count_plus_one(self, service, document):
        document.Tables.items.append(FakeTable(2, 2))
        with pytest.raises(IndexOutOfRangeError, match="for insertion"):
            service.insert_table_row(1, 4)

    def test_insert_column_before(self, service, document):
        table = FakeTable(2, 3)
        document.Tables.items.append(table)
        service.insert_table_column(1, 2)
        assert table.Columns.Count == 4

    def test_insert_column_count_plus_one_appends(self, service, document):
        table = FakeTable(2, 2)
        document.Tables.items.append(table)
        assert service.insert_table_column(1, 3) is True
        assert table.Columns.add_calls == [None]
        assert table.Columns.Count == 3

    def test_insert_before_existing_reports_not_appended(self, service, document):
        document.Tables.items.append(FakeTable(2, 2))
        assert service.insert_table_row(1, 2) is False
        assert service.insert_table_column(1, 1) is False

    def test_insert_column_zero_rejected(self, service, document):
        document.Tables.items.append(FakeTable(2, 3))
        with pytest.raises(IndexOutOfRangeError):
            service.insert_table_column(1, 0)

    def test_autoformat_default_applies_everything(self, service, document):
        table = FakeTable()
        document.Tables.items.append(table)
        service.apply_table_autoformat(1, "Grid Table 4")
        call = table.autoformat_calls[0]
        assert call.pop("Format") == "Grid Table 4"
        assert all(call.values())
        assert len(call) == 9

    def test_autoformat_flags(self, service, document):
        table = FakeTable()
        document.Tables.items.append(table)
        service.apply_table_autoformat(1, 16, apply_flags=1 | 32)
        call = table.autoformat_calls[0]
        assert call["Format"] == 16
        assert call["ApplyBorders"] is True
        assert call["ApplyHeadingRows"] is True
        assert call["ApplyShading"] is False
        assert call["AutoFit"] is False


class TestPictures:
    def test_insert_picture(self, service, document, selection):
        service.insert_picture("C:\\img.png")
        assert document.InlineShapes.add_calls == [("C:\\img.png", False, True, selection.Range)]

    def test_locked_resize_writes_dominant_dimension(self, service, document):
        shape = FakeInlineShape(height=100, width=200)
        document.InlineShapes.items.append(shape)
        # width ratio 2.0 beats height ratio 1.5
        service.set_inline_picture_size(1, 150, 400)
        assert shape.writes == ["Width"]
        assert shape.LockAspectRatio == -1

    def test_locked_resize_prefers_height_on_tie(self, service, document):
        shape = FakeInlineShape(height=100, width=200)
        document.InlineShapes.items.append(shape)
        service.set_inline_picture_size(1, 200, 400)
        assert shape.writes == ["Height"]

    def test_unlocked_resize_writes_both(self, service, document):
        shape = FakeInlineShape(height=100, width=200)
        document.InlineShapes.items.append(shape)
        service.set_inline_picture_size(1, 50, 60, lock_aspect_ratio=False)
        assert (shape.Height, shape.Width) == (50, 60)
        assert shape.LockAspectRatio == 0

    def test_single_dimension(self, service, document):
        shape = FakeInlineShape(height=100, width=200)
        document.InlineShapes.items.append(shape)
        service.set_inline_picture_size(1, 0, 80)
        assert shape.writes == ["Width"]

    def test_no_positive_dimension_leaves_shape_untouched(self, service, document):
        shape = FakeInlineShape(height=100, width=200)
        document.InlineShapes.items.append(shape)
        service.set_inline_picture_size(1, 0, -1, True)
        assert shape.LockAspectRatio == 0
        assert shape.writes == []

    def test_no_positive_dimension_needs_no_document(self, service):
        service.set_inline_picture_size(1, 0, 0)

    def test_zero_original_height_writes_both(self, service, document):
        shape = FakeInlineShape(height=0, width=200)
        document.InlineShapes.items.append(shape)
        service.set_inline_picture_size(1, 50, 100)
        assert (shape.Height, shape.Width) == (50, 100)
        assert shape.LockAspectRatio == -1

    def test_bad_index(self, service, document):
        with pytest.raises(IndexOutOfRangeError, match="InlineShape index 1"):
            service.set_inline_picture_size(1, 10, 10)


class TestHeadersFooters:
    def test_set_and_get_primary_header(self, service, document):
        service.set_header_footer_text(1, 1, True, "Title")
        assert service.get_header_footer_text(1, 1, True) == "Title"
        assert document.Sections(1).Footers(1).Range.Text == "\r"

    def test_inactive_variant(self, service, document):
        with pytest.raises(HeaderFooterNotFoundError, match="footer type \\(2\\)"):
            service.set_header_footer_text(1, 2, False, "x")

    def test_bad_section(self, service, document):
        with pytest.raises(IndexOutOfRangeError, match="Section index 2"):
            service.get_header_footer(2, 1, True)

    def test_bad_type(self, service, document):
        with pytest.raises(IndexOutOfRangeError, match="Header/footer type index 4"):
            service.get_header_footer(1, 4, True)


class TestPageSetup:
    def test_margins(self, service, document):
        service.set_page_margins(72, 72, 54, 54)
        setup = document.PageSetup
        assert (setup.TopMargin, setup.BottomMargin, setup.LeftMargin, setup.RightMargin) == (72, 72, 54, 54)

    def test_orientation_and_paper(self, service, document):
        service.set_page_orientation(1)
        service.set_paper_size(7)
        assert document.PageSetup.Orientation == 1
        assert document.PageSetup.PaperSize == 7


class TestCursorSelection:
    def test_move_to_end_then_start(self, service, selection):
        service.move_cursor_to_end()
        assert selection.Start == 11
        service.move_cursor_to_start()
        assert selection.calls == [("EndKey", 6), ("HomeKey", 6)]
        assert selection.Start == 0

    def test_extend_selection(self, service, selection):
        service.move_cursor(1, 5, extend=True)
        assert selection.calls == [("MoveRight", 1, 5, 1)]
        assert service.get_selection_text() == "Hello"

    def test_select_all_and_collapse(self, service, selection):
        service.select_all()
        assert service.get_selection_text() == "Hello World"
        service.collapse_selection(to_start=False)
        assert (selection.Start, selection.End) == (11, 11)

    def test_select_paragraph(self, service, document):
        service.select_paragraph(1)
        assert document.Paragraphs(1).Range.selected

    def test_select_paragraph_out_of_range(self, service, document):
        with pytest.raises(IndexOutOfRangeError):
            service.select_paragraph(5)

    def test_selection_info(self, service, selection):
        selection.Start, selection.End = 6, 11
        info = service.get_selection_info()
        assert info.text == "World"
        assert (info.start, info.end) == (6, 11)
        assert info.is_active is True
        assert info.type == 1

    def test_no_selection_type_is_inactive(self, service, selection):
        selection.Type = 0
        assert service.get_selection_info().is_active is False


class TestErrorWrapping:
    def test_com_failure_becomes_operation_error(self, service, selection):
        def broken(*args):
            raise RuntimeError("Command failed")

        selection.TypeText = broken
        with pytest.raises(OperationError, match="insert_text failed: Command failed") as exc_info:
            service.insert_text("x")
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_dead_window_becomes_operation_error(self, service, document):
        class DeadWindow:
            @property
            def Selection(self):
                raise RuntimeError("The object invoked has disconnected from its clients.")

        document.ActiveWindow = DeadWindow()
        with pytest.raises(OperationError, match="insert_text failed") as exc_info:
            service.insert_text("x")
        assert isinstance(exc_info.value.__cause__, RuntimeError)

        with pytest.raises(OperationError, match="toggle_bold failed"):
            service.toggle_bold()
        with pytest.raises(OperationError, match="move_cursor_to_start failed"):
            service.move_cursor_to_start()
