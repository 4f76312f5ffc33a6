"""Static HTML boilerplate for the tabbed host report.

Inline CSS and vanilla JS only, so the report works offline as a single file.
`{{TITLE}}` and `{{ON_LOAD}}` are substituted by the assembler.
"""

HTML_HEADER = r"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{{TITLE}}</title>
<style>
body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; margin: 20px; background: #f4f6f8; color: #222; }
h1 { font-size: 24px; margin-bottom: 16px; }
h3 { font-size: 16px; margin: 18px 0 8px; }
.tab-buttons { display: flex; flex-wrap: wrap; gap: 4px; border-bottom: 2px solid #0078d4; margin-bottom: 16px; }
.tab-buttons button { background: #e1e5ea; border: none; padding: 10px 18px; cursor: pointer; font-size: 14px; border-radius: 4px 4px 0 0; }
.tab-buttons button:hover { background: #c8d1db; }
.tab-buttons button.active { background: #0078d4; color: #fff; }
.tab { display: none; background: #fff; padding: 16px; border-radius: 4px; box-shadow: 0 1px 3px rgba(0,0,0,0.1); overflow-x: auto; }
table { border-collapse: collapse; width: 100%; font-size: 13px; }
th, td { border: 1px solid #d0d7de; padding: 6px 10px; text-align: left; vertical-align: top; }
th { background: #0078d4; color: #fff; }
tr:nth-child(even) td { background: #f6f8fa; }
.not-installed { color: red; font-weight: bold; }
.not-implemented { color: #6e7681; font-style: italic; }
</style>
<script>
function showTab(name) {
    var tabs = document.getElementsByClassName('tab');
    for (var i = 0; i < tabs.length; i++) {
        tabs[i].style.display = 'none';
    }
    var buttons = document.querySelectorAll('.tab-buttons button');
    for (var j = 0; j < buttons.length; j++) {
        buttons[j].classList.remove('active');
    }
    document.getElementById(name).style.display = 'block';
    document.getElementById('btn_' + name).classList.add('active');
}
{{ON_LOAD}}
</script>
</head>
<body>
<h1>{{TITLE}}</h1>"""

ON_LOAD_TEMPLATE = "window.onload = function () { showTab('{{FIRST_TAB}}'); };"

HTML_FOOTER = """</body>
</html>
"""
