"""
Run with: python -m coinrefill
"""
from coinrefill.main import main

if __name__ == "__main__":
    main()
