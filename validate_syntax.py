"""Quick syntax validation for the app modules"""
import ast
import sys

MODULES = ["app.py", "extractor.py", "exporter.py", "messages.py", "settings.py", "state.py"]

failed = False
for path in MODULES:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            code = f.read()

        ast.parse(code)
        print(f"✓ {path} syntax is valid!")
    except SyntaxError as e:
        print(f"✗ Syntax error in {path}:")
        print(f"  Line {e.lineno}: {e.msg}")
        print(f"  {e.text}")
        failed = True
    except OSError as e:
        print(f"✗ Error reading {path}: {e}")
        failed = True

sys.exit(1 if failed else 0)
