from csvq.infra.http.fetcher import fetch_csv_text

__all__ = ["fetch_csv_text"]
