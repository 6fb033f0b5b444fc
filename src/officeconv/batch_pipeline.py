"""
目录批量转换流水线
扫描单个目录（不递归），按扩展名分发到 DOCX->PDF / XLSX->CSV 转换器

- DOCX: 异步渲染，扫描结束后统一等待
- XLSX: 同步导出，阻塞扫描直到完成
- PPTX: 不支持，仅提示
- PDF: 已是最终格式，仅提示
- 其他扩展名: 忽略
"""

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from .config import Settings, get_settings
from .docx2pdf import DocxToPdfConverter
from .models import ConversionResult, ConversionStatus, FileKind, RunSummary
from .xlsx2csv import XlsxToCsvConverter


@dataclass
class BatchConversionPipeline:
    """目录批量转换流水线"""

    source_dir: Path
    renderer: DocxToPdfConverter = field(default_factory=DocxToPdfConverter)
    exporter: XlsxToCsvConverter = field(default_factory=XlsxToCsvConverter)

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, source_dir: Path | None = None
    ) -> "BatchConversionPipeline":
        """按配置构建流水线"""
        settings = settings or get_settings()
        return cls(
            source_dir=Path(source_dir) if source_dir else settings.source_dir,
            renderer=DocxToPdfConverter.from_settings(settings),
            exporter=XlsxToCsvConverter(encoding=settings.csv_encoding),
        )

    async def run(self) -> RunSummary:
        """执行一次完整的转换"""
        source_dir = Path(self.source_dir)
        entries = self._list_entries(source_dir)

        logger.info(f"开始转换文件: {source_dir}")
        summary = RunSummary(source_dir=source_dir)
        render_tasks: list[asyncio.Task[ConversionResult]] = []

        async with asyncio.TaskGroup() as tg:
            for path in entries:
                kind = FileKind.from_path(path)

                if kind == self.renderer.source_kind:
                    if self.renderer.target_exists(path):
                        summary.add(self._skip(path, "PDF"))
                    else:
                        render_tasks.append(tg.create_task(self.renderer.convert(path)))

                elif kind == self.exporter.source_kind:
                    if self.exporter.target_exists(path):
                        summary.add(self._skip(path, "CSV"))
                    else:
                        summary.add(self.exporter.convert(path))

                elif kind == FileKind.PPTX:
                    logger.warning(f"⚠ 跳过 {path.name} - PPTX 转换需要 LibreOffice 或专门工具")
                    summary.add(ConversionResult(source=path, status=ConversionStatus.UNSUPPORTED))

                elif kind == FileKind.PDF:
                    logger.info(f"✓ {path.name} 已是 PDF")
                    summary.add(ConversionResult(source=path, status=ConversionStatus.ALREADY_PDF))

        for task in render_tasks:
            summary.add(task.result())

        self._log_completion(summary)
        return summary

    def _list_entries(self, source_dir: Path) -> list[Path]:
        """列出目录下的普通文件（不递归）"""
        if not source_dir.exists():
            raise FileNotFoundError(f"找不到目录 '{source_dir}'")
        if not source_dir.is_dir():
            raise NotADirectoryError(f"不是目录: '{source_dir}'")
        return sorted(p for p in source_dir.iterdir() if p.is_file())

    def _skip(self, path: Path, target_label: str) -> ConversionResult:
        logger.info(f"跳过 {path.name} - {target_label} 已存在")
        return ConversionResult(
            source=path,
            status=ConversionStatus.SKIPPED,
            message=f"{target_label} 已存在",
        )

    def _log_completion(self, summary: RunSummary) -> None:
        """记录完成日志"""
        logger.info("✓ 转换完成！")
        logger.info(
            f"   转换 {summary.count(ConversionStatus.CONVERTED)} | "
            f"跳过 {summary.count(ConversionStatus.SKIPPED)} | "
            f"不支持 {summary.count(ConversionStatus.UNSUPPORTED)} | "
            f"已是 PDF {summary.count(ConversionStatus.ALREADY_PDF)} | "
            f"失败 {summary.count(ConversionStatus.FAILED)}"
        )
        for result in summary.failed:
            logger.warning(f"   - {result.source.name}: {result.message}")


def run_batch_conversion(
    source_dir: str | Path | None = None,
    settings: Settings | None = None,
) -> RunSummary:
    """执行目录批量转换（兼容函数接口）"""
    pipeline = BatchConversionPipeline.from_settings(settings, source_dir)
    return asyncio.run(pipeline.run())
