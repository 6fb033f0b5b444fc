"""
officeconv - Office 文档批量转换
"""

from .base_converter import BaseOfficeConverter
from .batch_pipeline import BatchConversionPipeline, run_batch_conversion
from .config import Settings, get_settings
from .docx2pdf import DocxToPdfConverter, PlaywrightPdfEngine, convert_docx_to_pdf
from .models import (
    ConversionResult,
    ConversionStatus,
    FileKind,
    PdfOptions,
    RunSummary,
)
from .xlsx2csv import XlsxToCsvConverter, convert_xlsx_to_csv

__all__ = [
    # 配置
    "Settings",
    "get_settings",
    # 转换器
    "BaseOfficeConverter",
    "DocxToPdfConverter",
    "PlaywrightPdfEngine",
    "XlsxToCsvConverter",
    "BatchConversionPipeline",
    # 数据模型
    "ConversionResult",
    "ConversionStatus",
    "FileKind",
    "PdfOptions",
    "RunSummary",
    # 兼容函数
    "convert_docx_to_pdf",
    "convert_xlsx_to_csv",
    "run_batch_conversion",
]
