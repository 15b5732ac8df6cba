import logging

from sources.handlers import handle_complete, handle_error, handle_request
from sources.mocks import requests_mock

from coldstream import Observable


def main():
    requests = Observable.from_(requests_mock)
    subscription = requests.subscribe(
        next=handle_request,
        error=handle_error,
        complete=handle_complete,
    )
    subscription.unsubscribe()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    main()
