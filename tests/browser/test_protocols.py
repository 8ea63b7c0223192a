"""The headless implementations satisfy the browser handle protocols."""

from pathlib import Path

from helper_utils.browser import protocols
from helper_utils.browser.backends import FileStorage, MemoryClipboard, MemoryStorage
from helper_utils.browser.html import HtmlDocument


class TestStructuralConformance:
    def test_document_and_element(self) -> None:
        doc = HtmlDocument("<div class='a' style='color: red'></div>")
        el = doc.query_selector("div")
        assert isinstance(doc, protocols.Document)
        assert isinstance(el, protocols.Element)
        assert isinstance(el, protocols.EventTarget)
        assert el is not None
        assert isinstance(el.class_list, protocols.ClassList)
        assert isinstance(el.style, protocols.StyleDeclaration)

    def test_storage_backends(self, tmp_path: Path) -> None:
        assert isinstance(MemoryStorage(), protocols.Storage)
        assert isinstance(FileStorage(tmp_path / "s.json"), protocols.Storage)

    def test_clipboard(self) -> None:
        assert isinstance(MemoryClipboard(), protocols.Clipboard)

    def test_plain_object_does_not_conform(self) -> None:
        assert not isinstance(object(), protocols.Storage)
