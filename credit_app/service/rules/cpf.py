"""
CPF (Cadastro de Pessoas Fisicas) validation.

A CPF has nine base digits followed by two check digits, each computed
as a mod-11 weighted sum of the digits before it.
"""

CPF_LENGTH = 11


def normalize_cpf(value: str) -> str:
    """Strip the usual "." and "-" separators and surrounding whitespace."""
    return value.strip().replace(".", "").replace("-", "")


def _check_digit(digits: str) -> int:
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    remainder = (total * 10) % 11
    return 0 if remainder == 10 else remainder


def is_valid_cpf(value: str) -> bool:
    """
    Validate a CPF number.

    Accepts both bare digits ("52998224725") and the formatted form
    ("529.982.247-25"). Sequences of one repeated digit are rejected
    even though their check digits happen to match.
    """
    cpf = normalize_cpf(value)

    if len(cpf) != CPF_LENGTH or not cpf.isdigit():
        return False

    if cpf == cpf[0] * CPF_LENGTH:
        return False

    first = _check_digit(cpf[:9])
    second = _check_digit(cpf[:10])

    return cpf[9] == str(first) and cpf[10] == str(second)
