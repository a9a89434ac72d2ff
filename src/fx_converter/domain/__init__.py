"""🏛️ Доменний шар: контракти, DTO та чисті перевірки."""
