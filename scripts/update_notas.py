# scripts/update_notas.py
# run from the project root: python -m scripts.update_notas
from notas.manifest import main

if __name__ == "__main__":
    raise SystemExit(main())
