# Path: readidx/xbrl_parser/foundation/http_fetcher.py
"""
Remote Schema Fetcher

Downloads taxonomy schemas referenced by absolute http(s) URLs.

- Connection failures are retried with exponential back-off
  (``http_max_retries`` attempts in total)
- A timeout (``http_timeout`` seconds) ends the fetch at once; the
  resolver records the schema as not downloaded and moves on
- HTTP 4xx/5xx is raised immediately
"""

import logging
import time
from typing import Optional

import requests
from tenacity import (
    Retrying,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    retry_if_not_exception_type,
)

from ...config_loader import ConfigLoader


RETRYABLE = (
    retry_if_exception_type(requests.exceptions.ConnectionError)
    & retry_if_not_exception_type(requests.exceptions.Timeout)
)


class HTTPFetcher:
    """
    Pooled ``requests`` session plus a per-instance fetch log.

    Example:
        fetcher = HTTPFetcher(config)
        content, info = fetcher.fetch("https://www.xbrl.org/2003/xbrl-instance-2003-12-31.xsd")
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        self.config = config if config else ConfigLoader()
        self.logger = logging.getLogger(__name__)

        self.http_timeout = self.config.get('http_timeout', 30)
        self.max_retries = max(1, self.config.get('http_max_retries', 3))
        self.user_agent = self.config.get('http_user_agent', 'readidx-xbrl/1.0')

        self.session = requests.Session()
        self.session.headers['User-Agent'] = self.user_agent
        self.session.headers['Accept'] = 'application/xml, text/xml;q=0.9, */*;q=0.1'

        self.fetch_attempts: list[dict] = []

    def fetch(self, url: str) -> tuple[bytes, dict]:
        """
        Download ``url``.

        Returns:
            (body bytes, info dict with status, content type, size, seconds)

        Raises:
            requests.Timeout: no answer within http_timeout
            requests.ConnectionError: every attempt failed to connect
            requests.HTTPError: non-2xx status
        """
        started = time.monotonic()
        retrying = Retrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=1, min=2, max=10),
            retry=RETRYABLE,
            reraise=True,
        )

        try:
            for attempt in retrying:
                with attempt:
                    number = attempt.retry_state.attempt_number
                    self.logger.debug(f"GET {url} (attempt {number}/{self.max_retries})")
                    response = self.session.get(url, timeout=self.http_timeout)
                    response.raise_for_status()
        except requests.exceptions.Timeout:
            self.fetch_attempts.append({'url': url, 'success': False, 'error': 'timeout'})
            self.logger.warning(f"Timed out after {self.http_timeout}s: {url}")
            raise
        except requests.exceptions.RequestException as e:
            self.fetch_attempts.append({'url': url, 'success': False, 'error': str(e)})
            self.logger.warning(f"Could not fetch {url}: {e}")
            raise

        elapsed = time.monotonic() - started
        self.fetch_attempts.append({'url': url, 'success': True, 'seconds': elapsed})

        info = {
            'url': url,
            'status': response.status_code,
            'content_type': response.headers.get('Content-Type', ''),
            'size': len(response.content),
            'seconds': elapsed,
        }
        self.logger.info(f"Fetched {url} ({info['size']} bytes, {elapsed:.2f}s)")
        return response.content, info

    def get_fetch_stats(self) -> dict:
        total = len(self.fetch_attempts)
        successful = sum(1 for entry in self.fetch_attempts if entry['success'])
        return {
            'total_attempts': total,
            'successful': successful,
            'failed': total - successful,
            'success_rate': successful / total if total else 0,
        }


__all__ = ['HTTPFetcher']
