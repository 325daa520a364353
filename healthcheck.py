"""
Quick health check script for the Smart Recharge Data Extractor
Run this to verify the app can start without errors
"""

import os
import sys

APP_MODULES = ["app.py", "extractor.py", "exporter.py", "messages.py", "settings.py", "state.py"]

print("=" * 60)
print("Smart Recharge Data Extractor - Health Check")
print("=" * 60)

# Check Python version
print(f"\n1. Python Version: {sys.version}")
if sys.version_info < (3, 9):
    print("   ⚠ WARNING: Python 3.9+ recommended")
else:
    print("   ✓ Python version OK")

# Check required files
print("\n2. Required Files:")
required_files = APP_MODULES + [
    "requirements.txt",
    "runtime.txt",
    ".streamlit/config.toml"
]

all_files_exist = True
for file in required_files:
    exists = os.path.exists(file)
    status = "✓" if exists else "✗"
    print(f"   {status} {file}")
    if not exists:
        all_files_exist = False

if not all_files_exist:
    print("\n   ✗ Some required files are missing!")
    sys.exit(1)

# Try importing critical modules
print("\n3. Critical Dependencies:")
critical_modules = [
    ("streamlit", "Streamlit"),
    ("pandas", "Pandas"),
    ("openpyxl", "openpyxl"),
]

import_success = True
for module, name in critical_modules:
    try:
        __import__(module)
        print(f"   ✓ {name}")
    except ImportError:
        print(f"   ✗ {name} - NOT INSTALLED")
        import_success = False

if not import_success:
    print("\n   ✗ Some dependencies are missing!")
    print("   Run: pip install -r requirements.txt")
    sys.exit(1)

# Check every module is valid Python
print("\n4. Syntax Check:")
for path in APP_MODULES:
    try:
        with open(path, "r", encoding="utf-8") as f:
            compile(f.read(), path, "exec")
        print(f"   ✓ {path} syntax is valid")
    except SyntaxError as e:
        print(f"   ✗ Syntax error in {path}: {e}")
        sys.exit(1)

# Run the extractor on the bundled example
print("\n5. Extraction Smoke Test:")
from extractor import extract_records
from messages import EXAMPLE_TEXT

records = extract_records(EXAMPLE_TEXT)
if len(records) != 1 or records[0].recharge_pin != "11584463856769":
    print(f"   ✗ Unexpected result on example text: {records}")
    sys.exit(1)
print(f"   ✓ Example text -> {records[0].category.value} / {records[0].denomination}")

# Summary
print("\n" + "=" * 60)
print("✓ Health check passed!")
print("=" * 60)
print("\nYou can now:")
print("  • Run locally: streamlit run app.py")
print("  • Deploy to Streamlit Cloud")
print("=" * 60)
