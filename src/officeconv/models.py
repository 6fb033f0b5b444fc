"""
数据模型定义模块
包含枚举、dataclass 和 Pydantic 模型
"""

import re
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

# ============ 枚举定义 ============


class FileKind(StrEnum):
    """源文件类型（按扩展名分类）"""

    DOCX = "docx"
    XLSX = "xlsx"
    PPTX = "pptx"
    PDF = "pdf"
    OTHER = "other"

    @classmethod
    def from_path(cls, path: Path) -> "FileKind":
        """按扩展名（忽略大小写）识别文件类型"""
        suffix = path.suffix.lower().lstrip(".")
        try:
            return cls(suffix)
        except ValueError:
            return cls.OTHER


class ConversionStatus(StrEnum):
    """单个文件的处理结果"""

    CONVERTED = "converted"
    SKIPPED = "skipped"
    UNSUPPORTED = "unsupported"
    ALREADY_PDF = "already_pdf"
    FAILED = "failed"


# ============ 内部数据模型 (dataclass) ============


@dataclass
class ConversionResult:
    """转换结果"""

    source: Path
    status: ConversionStatus
    outputs: list[Path] = field(default_factory=list)
    message: str = ""

    @property
    def success(self) -> bool:
        return self.status != ConversionStatus.FAILED


@dataclass
class RunSummary:
    """一次批量转换的汇总"""

    source_dir: Path
    results: list[ConversionResult] = field(default_factory=list)

    def add(self, result: ConversionResult) -> None:
        self.results.append(result)

    def count(self, status: ConversionStatus) -> int:
        return sum(1 for r in self.results if r.status == status)

    def by_status(self, status: ConversionStatus) -> list[ConversionResult]:
        return [r for r in self.results if r.status == status]

    @property
    def converted(self) -> list[ConversionResult]:
        return self.by_status(ConversionStatus.CONVERTED)

    @property
    def skipped(self) -> list[ConversionResult]:
        return self.by_status(ConversionStatus.SKIPPED)

    @property
    def failed(self) -> list[ConversionResult]:
        return self.by_status(ConversionStatus.FAILED)

    @property
    def has_failures(self) -> bool:
        return any(not r.success for r in self.results)

    @property
    def outputs(self) -> list[Path]:
        """本次运行实际写出的所有文件（含失败时的部分输出）"""
        return [p for r in self.results for p in r.outputs]

    def result_for(self, source: Path) -> ConversionResult | None:
        for r in self.results:
            if r.source == source:
                return r
        return None


# ============ 外部输入验证模型 (Pydantic) ============

_CSS_LENGTH = re.compile(r"^\d+(\.\d+)?(mm|cm|in|px)$")


class PdfOptions(BaseModel):
    """PDF 输出选项"""

    format: str = Field(default="A4")
    print_background: bool = Field(default=True)
    margin: str = Field(default="20mm")
    timeout_ms: int = Field(default=60_000, gt=0)

    @field_validator("margin", mode="before")
    @classmethod
    def validate_margin(cls, v: str | int | float) -> str:
        """校验页边距（纯数字按毫米处理）"""
        if isinstance(v, (int, float)):
            return f"{v}mm"
        v = str(v).strip()
        if not _CSS_LENGTH.match(v):
            raise ValueError(f"无效的页边距: {v!r}")
        return v

    def margins(self) -> dict[str, str]:
        """四边统一页边距"""
        return {side: self.margin for side in ("top", "right", "bottom", "left")}

    @classmethod
    def from_settings(cls, settings) -> "PdfOptions":
        return cls(
            format=settings.pdf_format,
            print_background=settings.print_background,
            margin=settings.pdf_margin,
            timeout_ms=settings.navigation_timeout_ms,
        )
