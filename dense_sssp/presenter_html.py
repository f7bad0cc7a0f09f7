"""Export several distance-table figures to a single HTML file with tabs."""

import html
import os
from typing import List, Tuple

import plotly.graph_objects as go

_PAGE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<script src="https://cdn.plot.ly/plotly-2.35.2.min.js"></script>
<style>
  body {{ font-family: Arial, sans-serif; margin: 20px; }}
  .tab-btn.active {{ background-color: #4CAF50; color: white; }}
</style>
</head>
<body>
<h1>{title}</h1>
<div>{buttons}</div>
{panels}
<script>
function showTable(idx) {{
  document.querySelectorAll(".table-panel").forEach(function(p, i) {{
    p.style.display = i === idx ? "block" : "none";
  }});
  document.querySelectorAll(".tab-btn").forEach(function(b, i) {{
    b.classList.toggle("active", i === idx);
  }});
}}
</script>
</body>
</html>
"""


def export_distance_tables_html(
    tables: List[Tuple[str, go.Figure]],
    output_path: str,
    title: str = "Shortest Path Distances",
    open_browser: bool = False,
) -> str:
    """
    Write one HTML page with a tab per table.

    Args:
        tables: List of (tab_name, figure) tuples
        output_path: Path to save HTML file
        title: Page title
        open_browser: Open the written file in the default browser

    Returns:
        Absolute path of the written file.
    """

    buttons = []
    panels = []
    for i, (tab_name, fig) in enumerate(tables):
        active = " active" if i == 0 else ""
        buttons.append(
            f"<button class='tab-btn{active}' onclick='showTable({i})'>{html.escape(tab_name)}</button>"
        )
        style = "block" if i == 0 else "none"
        fig_html = fig.to_html(full_html=False, include_plotlyjs=False, div_id=f"fig-{i}")
        panels.append(f"<div class='table-panel' style='display:{style}'>{fig_html}</div>")

    page = _PAGE.format(
        title=html.escape(title),
        buttons="".join(buttons),
        panels="\n".join(panels),
    )

    output_path = os.path.abspath(output_path)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(page)

    print(f"Saved distance tables to: {output_path}")

    if open_browser:
        import webbrowser
        webbrowser.open('file://' + output_path)

    return output_path
