# === FILE: link_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
from typing import Dict, Optional, Set
from urllib.parse import urlsplit

from aiohttp import ClientSession, ClientTimeout

from link_scout.config import CheckerConfig
from link_scout.crawler.fetcher import Fetcher
from link_scout.crawler.link_extractor import Extractor, extract_references, resolve_reference, strip_fragment
from link_scout.crawler.models import CrawlResult, Link
from link_scout.crawler.tracker import InFlightTracker
from link_scout.report.console import ConsoleReporter

__all__ = ("LinkChecker",)

_CRAWL_SCHEMES = ("http", "https")


class LinkChecker:
    """
    Асинхронная проверка ссылок сайта.

    Диспетчер читает найденные ссылки из очереди, отбрасывает чужие хосты,
    не-HTTP схемы и уже проверенные адреса, и запускает отдельную задачу на
    каждую новую ссылку. Обход заканчивается, когда очередь пуста и ни одна
    задача не выполняется.
    """

    def __init__(self, config: CheckerConfig, reporter: Optional[ConsoleReporter] = None, extractor: Extractor = extract_references) -> None:
        self.config = config
        self.reporter = reporter or ConsoleReporter()
        self.extractor = extractor
        self.start_url: str = config.start_url
        self.start_host = urlsplit(self.start_url).hostname
        self.visited: Dict[str, bool] = {}
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None
        self.logger = logging.getLogger("LinkScout")
        self._frontier: asyncio.Queue[Link] = asyncio.Queue()
        self._failures: asyncio.Queue[Optional[Link]] = asyncio.Queue()
        self._in_flight = InFlightTracker()
        self._tasks: Set[asyncio.Task[None]] = set()

    async def __aenter__(self) -> LinkChecker:
        self.session = ClientSession(timeout=ClientTimeout(total=self.config.timeout))
        self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        if self.session and not self.session.closed:
            await self.session.close()

    async def check(self) -> CrawlResult:
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        self.logger.info("Start checking %s", self.start_url)
        result = CrawlResult()
        collector = asyncio.create_task(self._collect(result))
        try:
            await self._dispatch()
        finally:
            await collector
        result.checked = len(self.visited)
        self.reporter.summary(result.checked, result.errors)
        return result

    # ------------------------------------------------------------------ #
    # Dispatcher                                                         #
    # ------------------------------------------------------------------ #

    async def _dispatch(self) -> None:
        self._frontier.put_nowait(Link(self.start_url, self.start_url))
        try:
            while True:
                link = await self._next_link()
                if link is None:
                    break
                self._accept(link)
        finally:
            # the collector stops on this sentinel, even when dispatching failed
            self._failures.put_nowait(None)

    async def _next_link(self) -> Optional[Link]:
        """Next frontier entry, or None once the frontier is drained and no worker runs."""
        while True:
            if not self._frontier.empty():
                return self._frontier.get_nowait()
            if self._in_flight.idle:
                return None
            getter = asyncio.ensure_future(self._frontier.get())
            watcher = asyncio.ensure_future(self._in_flight.wait_idle())
            done, pending = await asyncio.wait({getter, watcher}, return_when=asyncio.FIRST_COMPLETED)
            for fut in pending:
                fut.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            if getter in done:
                return getter.result()

    def _accept(self, link: Link) -> None:
        link = Link(link.source, strip_fragment(link.target))
        if urlsplit(link.source).hostname != self.start_host:
            # targets on other hosts are checked but not crawled further
            return
        if urlsplit(link.target).scheme not in _CRAWL_SCHEMES:
            return
        if link.target in self.visited:
            return
        self.visited[link.target] = True
        self.logger.info("Checking %s", link.target)
        self._in_flight.started()
        task = asyncio.create_task(self._verify(link))
        self._tasks.add(task)
        task.add_done_callback(self._on_worker_done)

    def _on_worker_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            self.logger.error("Link worker crashed: %r", task.exception())

    # ------------------------------------------------------------------ #
    # Worker                                                             #
    # ------------------------------------------------------------------ #

    async def _verify(self, link: Link) -> None:
        try:
            body = await self.fetcher.fetch(link.target)
            if body is None:
                self._failures.put_nowait(link)
                return
            for raw in self.extractor(body):
                try:
                    target = resolve_reference(link.target, raw)
                except ValueError as exc:
                    self.logger.warning("Error parsing %s as URL on %s: %s", raw, link.target, exc)
                    continue
                self._frontier.put_nowait(Link(link.target, target))
        finally:
            self._in_flight.finished()

    # ------------------------------------------------------------------ #
    # Error collector                                                    #
    # ------------------------------------------------------------------ #

    async def _collect(self, result: CrawlResult) -> None:
        while True:
            link = await self._failures.get()
            if link is None:
                break
            result.failures.append(link)
            self.reporter.failure(link)
