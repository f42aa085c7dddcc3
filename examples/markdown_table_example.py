"""Markdown 表格渲染示例

使用 left_align / center / right_align 过滤器生成定宽表格：

| No |       *Name*       |    Score   |
|----|--------------------|------------|
| 1. |       Charly       |       3000 |
"""

import sys
from pathlib import Path

# 添加项目根目录到路径
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from plaintext_filters.common import get_config, setup_logger
from plaintext_filters.engine import create_environment

TEMPLATE = """\
| No |       *Name*       |    Score   |
|----|--------------------|------------|
{% for member in team[:10] %}
| {{ (loop.index ~ '.') | left_align(length=2) }} | {{ member.name | center(length=18) }} | {{ member.score | right_align(length=10) }} |
{% endfor %}
"""


def main():
    config = get_config()
    setup_logger(log_level=config.log_level)
    
    team = [
        {"name": "Charly", "score": 3000},
        {"name": "Alexander", "score": 800},
        {"name": "Josephine", "score": 760},
        {"name": None, "score": 12.5},
    ]
    
    env = create_environment(config)
    print(env.from_string(TEMPLATE).render(team=team))


if __name__ == "__main__":
    main()
