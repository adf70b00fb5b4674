"""Namespace fetchers.

A fetcher retrieves the bundle of one namespace in one language. Two
implementations are provided:

- YAMLNamespaceFetcher reads ``<namespace>.<language>.yml`` files
- RestNamespaceFetcher GETs JSON from a translation endpoint

Both run their blocking I/O in a worker thread so the event loop keeps
serving other resolver calls while a fetch is outstanding.
"""

import asyncio
from pathlib import Path
from typing import Dict, Optional
from urllib.parse import urljoin

import requests
import yaml

from infrastructure.i18n.models import Bundle
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class YAMLNamespaceFetcher:
    """Fetcher for YAML translation files.

    Expects one file per namespace and language, named
    ``<namespace>.<language>.yml``, in the format::

        namespace:
          key1: message1
          key2: message2

    Attributes:
        translations_dir: Path to directory containing YAML files.
    """

    def __init__(self, translations_dir: Path):
        """Initialize YAML fetcher.

        Args:
            translations_dir: Path to directory with YAML translation files.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_fetcher", translations_dir=str(self.translations_dir)
        )

    def path_for(self, language: str, namespace: str) -> Path:
        return self.translations_dir / f"{namespace}.{language}.yml"

    async def fetch(self, language: str, namespace: str) -> Bundle:
        """Read the bundle of a namespace.

        Raises:
            FileNotFoundError: If no file exists for the pair.
            ValueError: If YAML parsing fails.
        """
        return await asyncio.to_thread(self._read, language, namespace)

    def _read(self, language: str, namespace: str) -> Bundle:
        yaml_file = self.path_for(language, namespace)
        if not yaml_file.exists():
            raise FileNotFoundError(
                f"No translation file found for namespace {namespace} "
                f"and language {language} in {self.translations_dir}"
            )

        try:
            with open(yaml_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
            raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

        bundle: Bundle = {}
        if data is None:
            return bundle
        if not isinstance(data, dict):
            logger.warning("invalid_yaml_format", file=str(yaml_file), expected="dict")
            raise ValueError(f"Expected a mapping of namespaces in {yaml_file}")

        for name, messages in data.items():
            if not isinstance(messages, dict):
                logger.warning(
                    "invalid_namespace_format",
                    file=str(yaml_file),
                    namespace=name,
                    expected="dict",
                )
                continue
            bundle[str(name)] = messages

        logger.info(
            "read_namespace_file",
            file=str(yaml_file),
            language=language,
            namespace=namespace,
            namespace_count=len(bundle),
        )
        return bundle


class RestNamespaceFetcher:
    """Fetcher for a JSON translation endpoint.

    Issues ``GET <base_url><path_template>`` with ``{language}`` and
    ``{namespace}`` substituted. The response body must be a JSON object
    mapping namespaces to messages.

    Attributes:
        base_url: Base URL for all requests
        path_template: Endpoint path with {language} and {namespace} placeholders
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        path_template: str = "/translations/{language}/{namespace}",
        timeout: int = 30,
        headers: Optional[Dict[str, str]] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url
        self.path_template = path_template
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})
        if headers:
            self._session.headers.update(headers)
        self._logger = logger.bind(component="rest_namespace_fetcher")

    def url_for(self, language: str, namespace: str) -> str:
        path = self.path_template.format(language=language, namespace=namespace)
        return urljoin(self.base_url, path)

    async def fetch(self, language: str, namespace: str) -> Bundle:
        """GET the bundle of a namespace.

        Raises:
            requests.RequestException: On connection errors and non-2xx responses.
            ValueError: If the body is not a JSON object.
        """
        return await asyncio.to_thread(self._get, language, namespace)

    def _get(self, language: str, namespace: str) -> Bundle:
        url = self.url_for(language, namespace)
        self._logger.debug("http_request", method="GET", url=url)

        response = self._session.get(url, timeout=self.timeout)
        response.raise_for_status()
        data = response.json()

        if not isinstance(data, dict):
            self._logger.warning(
                "invalid_translation_payload",
                url=url,
                payload_type=type(data).__name__,
            )
            raise ValueError(f"Expected a JSON object of namespaces from {url}")

        bundle: Bundle = {}
        for name, messages in data.items():
            if not isinstance(messages, dict):
                self._logger.warning(
                    "invalid_namespace_format",
                    url=url,
                    namespace=name,
                    expected="dict",
                )
                continue
            bundle[name] = messages

        self._logger.info(
            "http_response",
            url=url,
            status_code=response.status_code,
            namespace_count=len(bundle),
        )
        return bundle

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()
