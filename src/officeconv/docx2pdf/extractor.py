"""
DOCX 正文提取
使用 mammoth 将 Word 文档转换为 HTML 片段（保留段落、表格、标题结构，丢弃原样式）
"""

from pathlib import Path

import mammoth
from loguru import logger


def extract_html(docx_path: Path) -> str:
    """提取 DOCX 正文为 HTML 片段"""
    docx_path = Path(docx_path)
    with docx_path.open("rb") as f:
        result = mammoth.convert_to_html(f)

    for message in result.messages:
        logger.warning(f"{docx_path.name}: {message.type}: {message.message}")

    return result.value
