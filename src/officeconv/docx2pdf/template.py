"""
HTML 文档模板
把 mammoth 生成的正文片段嵌入固定的打印样式模板
"""

from bs4 import BeautifulSoup

DOCUMENT_CSS = """
body {
  font-family: Arial, sans-serif;
  padding: 20px;
  line-height: 1.6;
}
p { margin: 10px 0; }
table { border-collapse: collapse; width: 100%; margin: 20px 0; }
table, th, td { border: 1px solid #ddd; }
th, td { padding: 8px; text-align: left; }
h1, h2, h3, h4, h5, h6 { margin-top: 20px; margin-bottom: 10px; }
"""

HTML_TEMPLATE = f"""<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<style>{DOCUMENT_CSS}</style>
</head>
<body></body>
</html>
"""


def build_html_document(fragment: str) -> str:
    """将 HTML 片段放入模板 body，返回完整文档"""
    soup = BeautifulSoup(HTML_TEMPLATE, "html.parser")
    body = soup.body
    if fragment and fragment.strip():
        body.append(BeautifulSoup(fragment, "html.parser"))
    return str(soup)
