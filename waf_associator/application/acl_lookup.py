"""ACL Lookup - Finds a Web ACL by name across listing pages."""
from waf_associator.domain.entities import WebACL
from waf_associator.ports.outbound import LoggerPort, WafClientPort

LIST_PAGE_LIMIT = 100


class AclLookup:
    """Resolves a Web ACL name to its identity for one WAF API generation."""

    def __init__(self, waf_client: WafClientPort, logger: LoggerPort, page_limit: int = LIST_PAGE_LIMIT):
        self._waf_client = waf_client
        self._logger = logger
        self._page_limit = page_limit

    def find_web_acl(self, name: str) -> WebACL | None:
        """
        Find the first Web ACL whose name matches exactly (case-sensitive).

        Pages are requested one at a time and no page is requested after
        a match is found.

        Args:
            name: Web ACL name

        Returns:
            The matching WebACL, or None when no page contains it
        """
        version = self._waf_client.version
        next_marker = None
        pages = 0

        while True:
            response = self._waf_client.list_web_acls(limit=self._page_limit, next_marker=next_marker)
            pages += 1

            for summary in response.get("WebACLs") or []:
                if summary.get("Name") == name:
                    return WebACL.from_summary(summary, version)

            next_marker = response.get("NextMarker")
            if not next_marker:
                break

        self._logger.debug(f"No Web ACL named '{name}' in {pages} page(s) of {version.display_name}")
        return None

    def find_by_name(self, name: str) -> str | None:
        """
        Find a Web ACL identity by name.

        Returns:
            WebACLId (WAF Classic) or ARN (WAFv2), or None if not found
        """
        web_acl = self.find_web_acl(name)
        return web_acl.identity if web_acl else None
