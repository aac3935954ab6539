"""
Secret word lists.
"""

import yaml
from pathlib import Path
from typing import List, Optional


WORDS = [
    "Playa", "Montaña", "Hospital", "Biblioteca", "Aeropuerto",
    "Pizza", "Guitarra", "Elefante", "Cine", "Supermercado",
    "Fútbol", "Castillo", "Submarino", "Circo", "Volcán",
    "Restaurante", "Piscina", "Museo", "Granja", "Desierto",
    "Tren", "Escuela", "Gimnasio", "Boda", "Zoológico",
    "Iglesia", "Parque", "Barco", "Cocina", "Estadio",
    "Chocolate", "Astronauta", "Pirata", "Dinosaurio", "Mago",
    "Helado", "Paraguas", "Teléfono", "Bicicleta", "Reloj",
    "Bosque", "Isla", "Cárcel", "Discoteca", "Panadería",
    "Hotel", "Camping", "Carnaval", "Navidad", "Vampiro",
]


def load_words(words_path: str) -> List[str]:
    """
    Load a word list from a file.
    
    A `.yaml`/`.yml` file must hold a list of strings (or a mapping with a
    `words` key). Any other file is read as one word per line; blank lines
    and lines starting with '#' are skipped.
    
    Args:
        words_path: Path to the word file
        
    Returns:
        Words in file order
        
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file yields no words
    """
    words_file = Path(words_path)
    
    if not words_file.exists():
        raise FileNotFoundError(f"Word file not found: {words_path}")
    
    if words_file.suffix.lower() in (".yaml", ".yml"):
        with open(words_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
        if isinstance(data, dict):
            data = data.get("words")
        if not isinstance(data, list):
            raise ValueError(f"Word file {words_path} must contain a list of words")
        words = [str(w).strip() for w in data if w is not None and str(w).strip()]
    else:
        with open(words_file, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f]
        words = [line for line in lines if line and not line.startswith('#')]
    
    if not words:
        raise ValueError(f"Word file {words_path} contains no words")
    
    return words


def get_words(words_path: Optional[str] = None) -> List[str]:
    """Get the configured word list, falling back to the built-in one."""
    if words_path is None:
        return list(WORDS)
    return load_words(words_path)
