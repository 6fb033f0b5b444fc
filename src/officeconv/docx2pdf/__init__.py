"""
Word 转 PDF 核心模块
"""

from .converter import DocxToPdfConverter, convert_docx_to_pdf
from .engine import PdfEngine, PlaywrightPdfEngine
from .extractor import extract_html
from .template import HTML_TEMPLATE, build_html_document

__all__ = [
    # 类
    "DocxToPdfConverter",
    "PdfEngine",
    "PlaywrightPdfEngine",
    # 函数
    "build_html_document",
    "extract_html",
    "convert_docx_to_pdf",
    # 模板
    "HTML_TEMPLATE",
]
