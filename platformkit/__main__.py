"""Demo entrypoint: compose the shell and load every tab once.

Usage::

    ENVIRONMENT=development python -m platformkit
"""

from __future__ import annotations

import asyncio

from platformkit.config import get_settings
from platformkit.core.config import load_config
from platformkit.networking.exceptions import ResourceClientError
from platformkit.shell import AppShell
from platformkit.utils.log import configure_logging
from platformkit.utils.log import get_logger


async def _run(shell: AppShell) -> int:
    log = get_logger(component="demo")
    failures = 0
    features = shell.launch()
    # Views subscribe on creation, so build them all before any tab loads
    views = {feature.id: shell.select_tab(feature.id) for feature in features}
    for feature in features:
        view = views[feature.id]
        try:
            result = await view.load()
        except ResourceClientError as exc:
            failures += 1
            log.error("tab_load_failed", feature=feature.id, error=str(exc))
            continue
        count = len(result) if isinstance(result, list) else 1
        log.info("tab_loaded", feature=feature.id, title=feature.title, records=count)

    profile = shell.root_view("profile")
    log.info("profile_post_count", count=profile.post_count)
    profile.close()
    return failures


def main() -> int:
    configure_logging(get_settings().log_level)
    return 1 if asyncio.run(_run(AppShell(load_config()))) else 0


if __name__ == "__main__":
    raise SystemExit(main())
