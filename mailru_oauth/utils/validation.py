# uid в Моём Мире: десятичное беззнаковое 64-битное число,
# например 15410773191172635989
_MAX_UID = 2 ** 64 - 1


def validate_uid(uid: str) -> str:
    """
    Проверка uid перед вызовом users.get.

    Значение уходит в параметр uids подписанного запроса как есть, поэтому
    буквы, пробелы внутри и списки через запятую отсекаются здесь, а не
    ответом API.

    Raises:
        ValueError: Если uid не десятичное число в диапазоне uint64
    """
    cleaned = str(uid or "").strip()
    if not cleaned.isdigit() or not cleaned.isascii():
        raise ValueError(f"Invalid uid: {uid}. Must contain only digits.")
    if int(cleaned) > _MAX_UID:
        raise ValueError(f"Invalid uid: {uid}. Exceeds 64-bit range.")
    return cleaned
