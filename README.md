# webargus

webargus watches web addresses for you. You register an *order* (a URL plus
an SMS to send) through a small HTTP API. A background worker wakes every
five minutes and checks each pending order that is due, at most once an hour
per order. As soon as the URL answers with HTTP status 200, the order is
archived, removed from the pending list, and the SMS is posted to an SMS
gateway service.

## Installation

```
pip install .
```

## Configuration

Settings are read from the environment. At start-up a `.env` file is looked
for from the working directory upwards and loaded if found.

| Variable                     | Purpose                                                        |
|------------------------------|----------------------------------------------------------------|
| `GLAUCUS_SMS_SERVICE_URL`    | Endpoint the SMS notifications are POSTed to                   |
| `GLAUCUS_SMS_SERVICE_TOKEN`  | Bearer token for the SMS service; also the token the API expects |
| `TEST_ORDER_PHONE`           | Only printed at start-up                                       |

Example `.env`:

```
GLAUCUS_SMS_SERVICE_URL=http://localhost:8080/sms
GLAUCUS_SMS_SERVICE_TOKEN=token
```

If `GLAUCUS_SMS_SERVICE_TOKEN` is unset, the expected token is the empty
string, so a bare `Authorization: Bearer ` header is accepted.

## Running

```
webargus [--host HOST] [--port PORT]
```

This starts the monitoring worker in a background thread and the HTTP API in
the foreground. By default it listens on all addresses, port 80.

## HTTP API

The routes `/`, `/orders` and `/orders/add` require
`Authorization: Bearer <token>`, where the token is the value of
`GLAUCUS_SMS_SERVICE_TOKEN`. Without a `Bearer ` header the answer is
`401` with the plain-text body `Missing or invalid Authorization header`;
with a wrong token it is `401` with `Empty Bearer token`. Successful answers
are JSON. The HTTP method is not checked.

A route written with a trailing slash (for example `/orders/`) is answered
with a `301` redirect to the path without it.

### `/orders/add`

Registers a new order from a JSON body.

```
curl -X POST http://localhost/orders/add \
  -H "Authorization: Bearer token" \
  -d '{
        "url": "https://example.com/coming-soon",
        "checkType": "online200",
        "period": "hourly",
        "notify": {
          "phone": "PHONE",
          "title": "Argus",
          "message": "The page is online"
        }
      }'
```

`url`, `notify.phone`, `notify.title` and `notify.message` must be non-empty
strings; keys are matched exactly first and then case-insensitively.
`checkType` and `period` are stored as given but not used. A request that
lacks a required field, or whose body is not valid JSON, gets `400` and
`{"error":"Invalid request"}`. On success:

```json
{"message":"Successfully created","uuid":"<order id>"}
```

### `/orders`

Lists all pending orders:

```json
[
  {
    "id": "<order id>",
    "url": "https://example.com/coming-soon",
    "checkType": "online200",
    "notify": {"phone": "PHONE", "title": "Argus", "message": "The page is online"},
    "period": "hourly"
  }
]
```

### `/` and any other path

`/` answers `200` with `{"error":"Resource not specified"}` once
authenticated. Any path that is not a route gets the same answer without
authentication.

## Using it as a library

```python
from webargus.orders import create_order
from webargus.store import OrderStore
from webargus.period import PeriodTracker
from webargus.notify import SmsClient
from webargus.cron import Monitor
from webargus.server import Api, serve

pending = OrderStore()
archive = OrderStore()
sms = SmsClient("http://localhost:8080/sms", "token")
monitor = Monitor(pending, archive, PeriodTracker(), sms)

pending.put(create_order("https://example.com/", "online200", "hourly",
                         "PHONE", "Argus", "The page is online"))
passed = monitor.run_once()   # orders that answered 200 and were notified

api = Api(pending, "token")
response = api.handle("GET", "/orders", {"Authorization": "Bearer token"})
print(response.status, response.body)
```

- `webargus.orders`: `Order`, `NotificationRule` and `create_order`, which
  gives each order a random UUID; `Order.to_dict()` uses the API field names.
- `webargus.store`: `OrderStore`, a thread-safe in-memory map of orders by id
  (`put`, `get`, `exists`, `all`, `delete`, `len()`).
- `webargus.period`: `PeriodTracker(interval=3600, clock=time.monotonic)`
  records check times (`mark`) and tells which orders are due
  (`should_be_checked`, `checkable`).
- `webargus.checker`: `is_online(url, timeout=30)` is true only for a final
  status of 200; network errors count as offline.
- `webargus.notify`: `SmsClient` (also `SmsClient.from_env()`) posts
  `{"recipients": [...], "senderTitle": ..., "message": ...}` with a bearer
  token and returns the service's reply text, or `None` if it could not be
  sent; `notify()` archives the order, removes it from the pending store and
  sends its SMS.
- `webargus.cron`: `Monitor` with `iterate`, `run_once` and
  `run_forever(interval=300)`; the checker function can be replaced.
- `webargus.server`: `Api.handle(method, path, headers, body)` returns a
  `Response`; `make_server` and `serve` put it behind a threaded HTTP server;
  `is_valid_add_request` checks an add payload.
- `webargus.app`: `build_components()` wires everything from the environment
  and `main()` is the `webargus` command.

## Limitations

Orders live only in memory: pending and archived orders are lost when the
process stops, and the archive cannot be read through the API. The only
check is "answers with status 200"; `checkType` and `period` are not
interpreted. There is no HTTPS on the API server.

## Running the tests

```
pip install .[test]
pytest
```