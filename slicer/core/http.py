import requests
from requests.adapters import HTTPAdapter, Retry
import urllib3

UA = "slicer/1.0 (+apk attack-surface review)"

def make_session(pool_size: int = 10, verify: bool = True) -> requests.Session:
    # No status_forcelist: a 5xx is an answer worth reporting, not a retry.
    retries = Retry(
        total=1, backoff_factor=0.3,
        allowed_methods=frozenset(["GET", "HEAD"]),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retries, pool_connections=pool_size, pool_maxsize=pool_size)
    s = requests.Session()
    s.mount("http://", adapter); s.mount("https://", adapter)
    s.headers.update({"User-Agent": UA})
    if not verify:
        # --insecure: self-hosted backends behind intercepting proxies
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        s.verify = False
    return s

SESSION = make_session()
