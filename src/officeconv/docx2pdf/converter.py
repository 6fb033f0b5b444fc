"""
Word 转 PDF 转换器
DOCX -> HTML 片段 -> 模板化 HTML 文档 -> 无头浏览器 -> PDF
"""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from ..base_converter import BaseOfficeConverter
from ..models import ConversionResult, FileKind, PdfOptions
from .engine import PdfEngine, PlaywrightPdfEngine
from .extractor import extract_html
from .template import build_html_document


@dataclass
class DocxToPdfConverter(BaseOfficeConverter):
    """PDF 格式转换器"""

    options: PdfOptions = field(default_factory=PdfOptions)
    pdf_engine: PdfEngine = field(default_factory=PlaywrightPdfEngine)
    html_extractor: Callable[[Path], str] = extract_html

    @classmethod
    def from_settings(cls, settings) -> "DocxToPdfConverter":
        return cls(
            options=PdfOptions.from_settings(settings),
            pdf_engine=PlaywrightPdfEngine(
                headless=settings.headless,
                browser_args=list(settings.browser_args),
            ),
        )

    @property
    def source_kind(self) -> FileKind:
        return FileKind.DOCX

    def _get_file_extension(self) -> str:
        return ".pdf"

    def _get_target_label(self) -> str:
        return "PDF"

    async def convert(self, docx_path: Path, pdf_path: Path | None = None) -> ConversionResult:
        """执行转换，任何异常都转为失败结果，不向上抛出"""
        source_path = Path(docx_path)
        out_path = Path(pdf_path) if pdf_path else self.target_path_for(source_path)

        self._log_start(source_path)

        try:
            fragment = await asyncio.to_thread(self.html_extractor, source_path)
            html = build_html_document(fragment)
            await self.pdf_engine.render(html, out_path, self.options)
            if not out_path.exists():
                raise RuntimeError("PDF 未生成")
        except Exception as e:
            return self._failed(source_path, e)

        self._log_created(out_path)
        return self._succeeded(source_path, [out_path])


def convert_docx_to_pdf(docx_path: str, pdf_path: str | None = None) -> str | None:
    """将单个 Word 文件转换为 PDF（兼容函数接口）"""
    converter = DocxToPdfConverter()
    result = asyncio.run(converter.convert(Path(docx_path), Path(pdf_path) if pdf_path else None))
    return str(result.outputs[0]) if result.success else None
