"""
pytest 共享 fixtures
"""

import asyncio
from pathlib import Path

import openpyxl
import pytest
from docx import Document

from officeconv.docx2pdf import DocxToPdfConverter
from officeconv.models import PdfOptions
from officeconv.xlsx2csv import XlsxToCsvConverter


class FakePdfEngine:
    """替代无头浏览器：记录调用并写出一个最小 PDF"""

    def __init__(self, fail_for: set[str] | None = None, error: Exception | None = None):
        self.calls: list[tuple[str, Path, PdfOptions]] = []
        self.fail_for = fail_for or set()
        self.error = error or RuntimeError("render failed")

    async def render(self, html: str, pdf_path: Path, options: PdfOptions) -> None:
        self.calls.append((html, pdf_path, options))
        await asyncio.sleep(0)
        if pdf_path.stem in self.fail_for:
            raise self.error
        pdf_path.write_bytes(b"%PDF-1.4\n% fake\n%%EOF\n")


@pytest.fixture
def engine_factory():
    """按需创建假渲染引擎（可指定失败的文件）"""
    return FakePdfEngine


@pytest.fixture
def fake_engine() -> FakePdfEngine:
    return FakePdfEngine()


@pytest.fixture
def renderer(fake_engine: FakePdfEngine) -> DocxToPdfConverter:
    """使用假渲染引擎的 DOCX 转换器"""
    return DocxToPdfConverter(pdf_engine=fake_engine)


@pytest.fixture
def exporter() -> XlsxToCsvConverter:
    return XlsxToCsvConverter()


@pytest.fixture
def make_xlsx():
    """按 {sheet名: 行列表} 创建工作簿"""

    def _make(path: Path, sheets: dict[str, list[list]]) -> Path:
        wb = openpyxl.Workbook()
        first = True
        for name, rows in sheets.items():
            ws = wb.active if first else wb.create_sheet()
            ws.title = name
            first = False
            for row in rows:
                ws.append(row)
        wb.save(path)
        return path

    return _make


@pytest.fixture
def make_docx():
    """创建包含标题、段落和表格的 Word 文档"""

    def _make(path: Path, title: str = "健康报告", paragraphs: list[str] | None = None) -> Path:
        doc = Document()
        doc.add_heading(title, level=1)
        for text in paragraphs or ["第一段内容", "第二段内容"]:
            doc.add_paragraph(text)
        table = doc.add_table(rows=2, cols=2)
        table.cell(0, 0).text = "指标"
        table.cell(0, 1).text = "数值"
        table.cell(1, 0).text = "心率"
        table.cell(1, 1).text = "72"
        doc.save(path)
        return path

    return _make


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """临时目录"""
    return tmp_path
