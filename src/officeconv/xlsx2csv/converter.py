"""
Excel 转 CSV 转换器
将工作簿的每个 sheet 分别导出为 CSV 文件

规则：
1. 第一个 sheet 写入主输出路径 <name>.csv
2. 其余 sheet 写入 <name>_<sheet名>.csv（sheet 名原样拼接）
3. 单元格按显示文本输出（日期、百分比、千分位等格式）
4. 公式单元格输出缓存值
"""

import csv
import re
from dataclasses import dataclass
from datetime import date, datetime, time
from pathlib import Path

import openpyxl
from loguru import logger

from ..base_converter import BaseOfficeConverter
from ..models import ConversionResult, FileKind


def sheet_output_path(primary_path: Path, sheet_name: str) -> Path:
    """在 .csv 后缀前插入 sheet 名，得到附加 sheet 的输出路径"""
    primary_path = Path(primary_path)
    return primary_path.with_name(f"{primary_path.stem}_{sheet_name}{primary_path.suffix}")


@dataclass
class XlsxToCsvConverter(BaseOfficeConverter):
    """CSV 格式转换器"""

    encoding: str = "utf-8"
    delimiter: str = ","

    @property
    def source_kind(self) -> FileKind:
        return FileKind.XLSX

    def _get_file_extension(self) -> str:
        return ".csv"

    def _get_target_label(self) -> str:
        return "CSV"

    # ===== 模板方法 =====
    def convert(self, xlsx_path: Path, csv_path: Path | None = None) -> ConversionResult:
        """执行转换，任何异常都转为失败结果，不向上抛出"""
        source_path = Path(xlsx_path)
        out_path = Path(csv_path) if csv_path else self.target_path_for(source_path)
        written: list[Path] = []

        self._log_start(source_path)

        try:
            workbook = openpyxl.load_workbook(str(source_path), data_only=True)
            try:
                for index, sheet in enumerate(workbook.worksheets):
                    target = out_path if index == 0 else sheet_output_path(out_path, sheet.title)
                    self._write_sheet(sheet, target)
                    written.append(target)
                    self._log_created(target)
            finally:
                workbook.close()
        except Exception as e:
            return self._failed(source_path, e, written)

        return self._succeeded(source_path, written)

    def _write_sheet(self, sheet, target: Path) -> None:
        """写出单个 sheet"""
        with target.open("w", encoding=self.encoding, newline="") as f:
            writer = csv.writer(f, delimiter=self.delimiter, lineterminator="\n")
            writer.writerows(self.sheet_rows(sheet))

    def sheet_rows(self, sheet) -> list[list[str]]:
        """按 sheet 的已用区域返回所有行的显示文本"""
        if self._is_empty(sheet):
            return []

        rows = []
        for row in sheet.iter_rows(
            min_row=sheet.min_row,
            max_row=sheet.max_row,
            min_col=sheet.min_column,
            max_col=sheet.max_column,
        ):
            rows.append([self._format_cell_value(cell) for cell in row])
        return rows

    def _is_empty(self, sheet) -> bool:
        """openpyxl 对空 sheet 仍报告 A1 区域"""
        if sheet.max_row > 1 or sheet.max_column > 1:
            return False
        return sheet.cell(row=1, column=1).value is None

    # ===== 单元格格式化 =====
    def _format_cell_value(self, cell) -> str:
        """格式化单元格值"""
        value = getattr(cell, "value", None)
        if value is None:
            return ""

        number_format = getattr(cell, "number_format", None) or "General"

        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"

        if isinstance(value, datetime):
            return self._format_datetime(value, number_format)

        if isinstance(value, date):
            return value.strftime("%Y-%m-%d")

        if isinstance(value, time):
            return value.strftime("%H:%M:%S")

        if not isinstance(value, (int, float)):
            return str(value)

        return self._format_number(value, number_format)

    def _format_datetime(self, value: datetime, number_format: str) -> str:
        """格式化日期时间"""
        if "H" in number_format or "h" in number_format:
            return value.strftime("%Y-%m-%d %H:%M:%S")
        return value.strftime("%Y-%m-%d")

    def _format_number(self, value: int | float, number_format: str) -> str:
        """格式化数字"""
        pattern = self._clean_number_format(number_format)

        if "%" in pattern:
            return self._format_percentage(value, pattern)

        if re.search(r"0E[+-]", pattern, re.IGNORECASE):
            return self._format_scientific(value, pattern)

        if "#,##" in pattern:
            return self._format_thousands(value, pattern, number_format)

        decimal_match = re.search(r"0\.(0+)", pattern)
        if decimal_match:
            return f"{value:.{len(decimal_match.group(1))}f}"

        if pattern.strip() == "0":
            return f"{value:.0f}"

        if isinstance(value, float) and value == int(value):
            return str(int(value))
        return str(value)

    def _clean_number_format(self, number_format: str) -> str:
        """去掉颜色/条件段和引号字面量，只保留正数段用于判断格式类型"""
        pattern = re.sub(r"\[[^\]]*\]", "", number_format)
        pattern = re.sub(r'"[^"]*"', "", pattern)
        return pattern.split(";")[0]

    def _format_percentage(self, value: float, number_format: str) -> str:
        """格式化百分比"""
        decimal_match = re.search(r"0\.(0+)%", number_format)
        decimals = len(decimal_match.group(1)) if decimal_match else 0
        return f"{value * 100:.{decimals}f}%"

    def _format_scientific(self, value: float, number_format: str) -> str:
        """格式化科学计数法"""
        decimal_match = re.search(r"0\.(0+)E", number_format, re.IGNORECASE)
        decimals = len(decimal_match.group(1)) if decimal_match else 2
        return f"{value:.{decimals}E}"

    def _format_thousands(self, value: float, pattern: str, number_format: str) -> str:
        """格式化千分位（含货币符号）"""
        decimal_match = re.search(r"0\.(0+)", pattern)
        decimals = len(decimal_match.group(1)) if decimal_match else 0
        formatted = f"{value:,.{decimals}f}"
        if "¥" in number_format or "￥" in number_format:
            return f"¥{formatted}"
        elif "$" in number_format:
            return f"${formatted}"
        elif "€" in number_format:
            return f"€{formatted}"
        return formatted


def convert_xlsx_to_csv(
    xlsx_path: str,
    csv_path: str | None = None,
    encoding: str = "utf-8",
) -> list[str] | None:
    """将单个 Excel 文件转换为 CSV（兼容函数接口）"""
    converter = XlsxToCsvConverter(encoding=encoding)
    result = converter.convert(Path(xlsx_path), Path(csv_path) if csv_path else None)
    if not result.success:
        logger.debug(f"{xlsx_path} 转换失败，部分输出: {result.outputs}")
        return None
    return [str(p) for p in result.outputs]
