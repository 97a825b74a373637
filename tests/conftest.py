"""Configuração do pytest para o projeto saga-relay."""

import sys
from pathlib import Path

# Adiciona src/ e a raiz ao PYTHONPATH (imports absolutos, tests.fakes e scripts)
root_path = Path(__file__).parent.parent
for path in (root_path, root_path / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
