"""
HTML 转 PDF 渲染引擎
每次转换启动独立的无头 Chromium（一个 context、一个 page），结束时全部关闭
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from loguru import logger
from playwright.async_api import async_playwright

from ..models import PdfOptions


class PdfEngine(Protocol):
    """HTML -> PDF 渲染接口"""

    async def render(self, html: str, pdf_path: Path, options: PdfOptions) -> None: ...


@dataclass
class PlaywrightPdfEngine:
    """基于 Playwright 的渲染引擎"""

    headless: bool = True
    browser_args: list[str] = field(
        default_factory=lambda: ["--no-sandbox", "--disable-setuid-sandbox"]
    )

    async def render(self, html: str, pdf_path: Path, options: PdfOptions) -> None:
        """渲染 HTML 并写出 PDF；超时或失败时抛出异常"""
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=self.headless, args=self.browser_args)
            try:
                context = await browser.new_context()
                page = await context.new_page()
                page.set_default_navigation_timeout(options.timeout_ms)

                await page.set_content(
                    html, wait_until="domcontentloaded", timeout=options.timeout_ms
                )
                await page.pdf(
                    path=str(pdf_path),
                    format=options.format,
                    print_background=options.print_background,
                    margin=options.margins(),
                )
                logger.debug(f"PDF 渲染完成: {pdf_path}")

                await page.close()
                await context.close()
            finally:
                await browser.close()
