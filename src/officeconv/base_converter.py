"""
文档转换器抽象基类
提供所有格式转换器的共享逻辑（目标路径推导、日志、结果封装）
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from .models import ConversionResult, ConversionStatus, FileKind


@dataclass
class BaseOfficeConverter(ABC):
    """Office 文档转换器抽象基类"""

    # ===== 目标路径 =====
    def target_path_for(self, source_path: Path) -> Path:
        """按扩展名替换推导目标文件路径"""
        return Path(source_path).with_suffix(self._get_file_extension())

    def target_exists(self, source_path: Path) -> bool:
        """目标文件是否已存在（已存在即视为转换完成）"""
        return self.target_path_for(source_path).exists()

    # ===== 共享实现 =====
    def _log_start(self, source_path: Path) -> None:
        """记录开始日志"""
        logger.info(f"正在转换 {source_path.name} 为 {self._get_target_label()}...")

    def _log_created(self, out_path: Path) -> None:
        """记录单个输出文件"""
        logger.info(f"✓ 已生成 {out_path.name}")

    def _succeeded(self, source_path: Path, outputs: list[Path]) -> ConversionResult:
        """封装成功结果"""
        return ConversionResult(
            source=source_path,
            status=ConversionStatus.CONVERTED,
            outputs=outputs,
        )

    def _failed(
        self,
        source_path: Path,
        error: Exception,
        outputs: list[Path] | None = None,
    ) -> ConversionResult:
        """记录错误并封装失败结果（已写出的部分文件不回滚）"""
        message = str(error) or type(error).__name__
        logger.error(f"转换 {source_path.name} 出错: {message}")
        return ConversionResult(
            source=source_path,
            status=ConversionStatus.FAILED,
            outputs=list(outputs or []),
            message=message,
        )

    # ===== 抽象方法（子类实现）=====
    @property
    @abstractmethod
    def source_kind(self) -> FileKind:
        """可处理的源文件类型"""
        ...

    @abstractmethod
    def _get_file_extension(self) -> str:
        """返回输出文件扩展名"""
        ...

    @abstractmethod
    def _get_target_label(self) -> str:
        """日志中使用的目标格式名称"""
        ...
