"""
Run with: python -m curveradius
"""
from curveradius.main import main

if __name__ == "__main__":
    main()
