"""Pinned project domain entity."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProjectEntity:
    """Domain entity for one pinned repository.

    A flattened projection of a single upstream repository record.
    Identity within one result is ``repo_name``.

    Attributes:
        repo_name: Repository name
        repo_link: Browser URL of the repository
        repo_description: Description, None when the repository has none
        is_fork: Whether the repository is a fork
        is_template: Whether the repository is a template
        created_at: Creation timestamp as reported upstream (ISO 8601)
        last_update: Last update timestamp as reported upstream (ISO 8601)
        main_language: Primary language, None when GitHub detected none
        star_amount: Stargazer count
        topics: Repository topics
    """

    repo_name: str
    repo_link: str
    repo_description: str | None
    is_fork: bool
    is_template: bool
    created_at: str
    last_update: str
    main_language: str | None
    star_amount: int
    topics: tuple[str, ...] = field(default_factory=tuple)
