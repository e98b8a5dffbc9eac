"""
Renderbase SDK CLI entry point.

Usage:
    python -m renderbase templates list
    python -m renderbase documents generate tmpl_invoice --var invoiceNumber=INV-001
"""

from renderbase.cli import main

if __name__ == "__main__":
    main()
