"""
Excel 转 CSV 核心模块
"""

from .converter import XlsxToCsvConverter, convert_xlsx_to_csv, sheet_output_path

__all__ = [
    "XlsxToCsvConverter",
    "convert_xlsx_to_csv",
    "sheet_output_path",
]
