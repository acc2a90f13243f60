# --------------------------------------------------------------
# File: password_policy.py
# Description: Medidor orientativo de robustez para la contraseña de un token.
# --------------------------------------------------------------
"""Estimación de fortaleza mostrada en la página de cifrado; nunca bloquea el cifrado."""

from __future__ import annotations

import math
import re
from typing import List, Tuple

COMMON = {
    "123456",
    "12345678",
    "123456789",
    "qwerty",
    "password",
    "pass",
    "111111",
    "abc123",
    "letmein",
    "iloveyou",
    "admin",
    "welcome",
    "secret",
    "dragon",
    "monkey",
    "passw0rd",
}

LOWER = re.compile(r"[a-z]")
UPPER = re.compile(r"[A-Z]")
DIGIT = re.compile(r"\d")
SYMBOL = re.compile(r"[^\w\s]")
NON_ASCII = re.compile(r"[^\x00-\x7f]")

# Tamaño aproximado del alfabeto que aporta cada clase.
POOLS = ((LOWER, 26), (UPPER, 26), (DIGIT, 10), (SYMBOL, 33), (NON_ASCII, 100))

RECOMMENDED_LENGTH = 12
RECOMMENDED_BITS = 60


def estimate_entropy_bits(password: str) -> float:
    """Estima los bits de entropía suponiendo caracteres independientes del alfabeto usado."""

    pool = sum(size for pattern, size in POOLS if pattern.search(password))
    if not password or pool == 0:
        return 0.0
    return len(password) * math.log2(pool)


def class_count(password: str) -> int:
    """Cuenta los grupos ASCII de caracteres presentes en la contraseña."""

    return sum(1 for pattern in (LOWER, UPPER, DIGIT, SYMBOL) if pattern.search(password))


def has_long_repetition(password: str, max_run: int = 3) -> bool:
    """Detecta repeticiones largas de un mismo carácter."""

    return re.search(rf"(.)\1{{{max_run},}}", password) is not None


def check_password_strength(password: str) -> Tuple[bool, List[str], int]:
    """Evalúa la contraseña y devuelve recomendación, motivos y puntuación.

    Args:
        password (str): Contraseña que protegerá el token.

    Returns:
        Tuple[bool, List[str], int]: Si alcanza lo recomendado, motivos de
        mejora y puntuación entre 0 y 100.

    """

    reasons: List[str] = []
    bits = estimate_entropy_bits(password)

    if len(password) < RECOMMENDED_LENGTH:
        reasons.append(f"Usa al menos {RECOMMENDED_LENGTH} caracteres.")
    if password.lower() in COMMON:
        reasons.append("Contraseña demasiado común.")
        bits = min(bits, 10.0)
    if has_long_repetition(password):
        reasons.append("Evita repeticiones largas del mismo carácter.")
        bits *= 0.5
    if class_count(password) < 3:
        reasons.append("Usa al menos 3 de: minúsculas, mayúsculas, dígitos, símbolos.")
    elif bits < RECOMMENDED_BITS:
        reasons.append(f"Alarga la contraseña para superar los {RECOMMENDED_BITS} bits estimados.")

    score = max(0, min(100, int(bits * 100 / (RECOMMENDED_BITS * 1.5))))
    return not reasons, reasons, score
