"""
Static catalog served when no source returns anything.
"""

from booksearch.domain.models import GroupedRecord, SourceLink

DEMO_SOURCE = "demo"

_CATALOG = [
    (
        "Война и мир",
        "Лев Толстой",
        "Роман-эпопея, описывающий русское общество в эпоху наполеоновских войн.",
    ),
    (
        "Преступление и наказание",
        "Фёдор Достоевский",
        "Психологический роман о преступлении и его последствиях.",
    ),
    (
        "Мастер и Маргарита",
        "Михаил Булгаков",
        "Философский роман о добре и зле, любви и предательстве.",
    ),
    (
        "Отцы и дети",
        "Иван Тургенев",
        "Роман о конфликте поколений и идейных разногласиях в русском обществе XIX века.",
    ),
    (
        "Мёртвые души",
        "Николай Гоголь",
        "Поэма в прозе, сатирически изображающая помещичью Россию.",
    ),
    (
        "Герой нашего времени",
        "Михаил Лермонтов",
        "Первый психологический роман в русской литературе.",
    ),
    (
        "Анна Каренина",
        "Лев Толстой",
        "Трагическая история любви замужней женщины.",
    ),
    (
        "Евгений Онегин",
        "Александр Пушкин",
        "Роман в стихах, энциклопедия русской жизни.",
    ),
    (
        "Тихий Дон",
        "Михаил Шолохов",
        "Роман-эпопея о донском казачестве во время Первой мировой и Гражданской войн.",
    ),
    (
        "Собачье сердце",
        "Михаил Булгаков",
        "Сатирическая повесть об опасных социальных экспериментах.",
    ),
    (
        "Горе от ума",
        "Александр Грибоедов",
        "Классическая комедия в стихах, высмеивающая нравы московского дворянства.",
    ),
    (
        "Доктор Живаго",
        "Борис Пастернак",
        "Роман о жизни русской интеллигенции на фоне драматических событий начала XX века.",
    ),
]


def fallback_catalog() -> list[GroupedRecord]:
    """Return a fresh copy of the demo catalog, one demo source per book."""
    return [
        GroupedRecord(
            title=title,
            author=author,
            description=description,
            sources=[SourceLink(name=DEMO_SOURCE, link="#")],
        )
        for title, author, description in _CATALOG
    ]
