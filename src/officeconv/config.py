"""
应用配置管理模块
使用 pydantic-settings 统一管理环境变量和配置
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置"""

    model_config = SettingsConfigDict(
        env_prefix="OFFICECONV_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 默认扫描目录（命令行未指定时使用）
    source_dir: Path = Field(default=Path("./documents"))

    # PDF 渲染配置
    navigation_timeout_ms: int = Field(default=60_000, gt=0)
    pdf_format: str = Field(default="A4")
    pdf_margin: str = Field(default="20mm")
    print_background: bool = Field(default=True)

    # 浏览器配置
    headless: bool = Field(default=True)
    browser_args: list[str] = Field(
        default_factory=lambda: ["--no-sandbox", "--disable-setuid-sandbox"]
    )

    # CSV 输出
    csv_encoding: str = Field(default="utf-8")

    # 日志配置
    log_level: str = Field(default="INFO")
    log_format: str = Field(
        default="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )


# 全局配置实例（懒加载）
_settings: Settings | None = None


def get_settings() -> Settings:
    """获取配置实例（单例模式）"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """清除缓存的配置实例（环境变量变化后重新加载）"""
    global _settings
    _settings = None
