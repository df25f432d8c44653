from repoinfo.http.client.downloader import fetch
from repoinfo.http.client.response import HttpResult

__all__ = ['fetch', 'HttpResult']
