from __future__ import annotations

from typing import Callable, Iterable, List

import structlog

from plugin_skeleton.options.errors import SubmissionRejected
from plugin_skeleton.options.sanitize import sanitize, validate
from plugin_skeleton.options.schema import RawSubmission, SanitizedOptions, SettingsGroup
from plugin_skeleton.options.store import OptionsStore

log = structlog.get_logger(__name__)


async def load_options(
    store: OptionsStore,
    group: SettingsGroup,
    *,
    option_name: str,
) -> SanitizedOptions:
    stored = await store.get(option_name)
    defaults = group.defaults()
    if stored is None:
        return defaults
    # fields added to the group after the options were stored get their default
    return {name: stored.get(name, default) for name, default in defaults.items()}


async def save_options(
    store: OptionsStore,
    group: SettingsGroup,
    submission: RawSubmission,
    *,
    option_name: str,
) -> SanitizedOptions:
    errors = validate(group, submission)
    if errors:
        log.warning(
            "options_rejected",
            group=group.id,
            errors=[e.as_dict() for e in errors],
        )
        raise SubmissionRejected(group.id, errors)

    cleaned = sanitize(group, submission)
    await store.update(option_name, cleaned)

    # values may be user text: log keys only
    log.info("options_saved", group=group.id, option_name=option_name, keys=sorted(cleaned))
    return cleaned


async def ensure_default_options(
    store: OptionsStore,
    groups: Iterable[SettingsGroup],
    *,
    option_name_for: Callable[[str], str],
) -> List[str]:
    """Store each group's defaults unless options already exist. Returns the names created."""
    created: List[str] = []
    for group in groups:
        name = option_name_for(group.id)
        if await store.add(name, group.defaults()):
            created.append(name)

    if created:
        log.info("default_options_provisioned", option_names=created)
    return created
