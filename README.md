# eddi-server

Small asyncio building blocks for a game server: a TCP server socket and an
accept loop, a registry of accepted clients, a registry of background tasks,
a UDP transmitter for fixed-size packets and a simple request/response
connection handler.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Configuration

The bind address is read from the environment. If a `.env` file is found
(searched upwards from the working directory), it is loaded first; variables
already set in the environment take precedence over the file.

```
HOST=0.0.0.0
PORT=7373
```

`eddi_server.env_detector.get_bind_address()` returns `"HOST:PORT"`, or
`None` when either variable is missing. `get_var(key)`, `get_host()` and
`get_port()` return single values, or `None`.

## Running the acceptor

```python
import asyncio

from eddi_server.acceptor import AcceptorService


async def main() -> None:
    service = AcceptorService()
    await service.run()
    await asyncio.Event().wait()


asyncio.run(main())
```

`AcceptorService.run()` binds a listening socket at the configured address
and starts the accept loop as a background task, stored in the service's
`TaskRegistry` under id `0`; it returns that task's `TaskEntity`. It raises
`RuntimeError` when `HOST` or `PORT` is not set, and `ValueError` or
`OSError` when the address cannot be bound. Every accepted connection is
wrapped in an `AcceptedClientSocket` and stored in the service's
`ClientSocketRepository` (`service.clients`). The loop ends when the
listening socket (`service.server`) is closed.

## Modules

- `eddi_server.env_detector`: `get_var`, `get_host`, `get_port`,
  `get_bind_address`.
- `eddi_server.local_ip`: `get_local_ip()` returns the address of the local
  interface used for outbound traffic, or `None`. No packet is sent.
- `eddi_server.server_socket`: `bind(addr)` takes `"host:port"` (or
  `"[v6]:port"`) and returns a non-blocking, listening `ServerSocket`; it
  raises `ValueError` for a malformed address and `OSError` when binding
  fails. `ServerSocket` has `local_address()`, `close()` and works as a
  context manager.
- `eddi_server.acceptor`: `accept(server)` awaits the next connection and
  returns its socket; `AcceptorService` as described above.
- `eddi_server.client_socket`: `AcceptedClientSocket` holds a stream reader
  and writer, a unique increasing `id` starting at 1, an optional
  `user_token` and the `is_authenticated` property;
  `AcceptedClientSocket.from_socket(sock)` wraps a connected socket and
  `close()` closes it. `ClientSocketRepository` has `register(client)`,
  `get(client_id)`, `in` and `len()`.
- `eddi_server.task_registry`: `TaskRegistry.spawn(task_id, coro)` starts a
  coroutine as a task and stores a `TaskEntity` for it, replacing any entry
  with the same id; `get(task_id)`, `in` and `len()` look entries up.
  `TaskEntity.stop()` marks the entity stopped and drops the task handle
  without cancelling the task.
- `eddi_server.transmit_data`: `TransmitData`, a zero-padded buffer of
  exactly 1024 bytes; `write(payload)` copies bytes to its start.
- `eddi_server.transmitter`: `UdpTransmitter.open(bind_addr)` binds a UDP
  endpoint; `send(target_addr, data)` sends the whole 1024-byte buffer to a
  literal IP address (`"1.2.3.4:5"` or `"[::1]:5"`; host names raise
  `ValueError`); `close()` releases it and it works as an async context
  manager. `TransmitterService.send_welcome_message(client)` writes
  `b"Hello from server"` to a connected client.
- `eddi_server.connection`: `receive(reader)` reads one chunk of up to 1024
  bytes (`None` at end of stream), `transmit(writer, request)` answers with
  `b"Hello from server"`, and `handle_connection(reader, writer)` does one
  exchange and closes the connection. It fits `asyncio.start_server`:

```python
server = await asyncio.start_server(handle_connection, "127.0.0.1", 7373)
```

## What it does not do

There is no command-line program; the pieces are used from your own asyncio
code. The acceptor only registers clients: it does not read from them, answer
them, send the welcome message or remove clients that disconnect. There is no
game logic, authentication or persistent storage.