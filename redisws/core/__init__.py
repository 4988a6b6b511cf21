"""
Core of redisws.

Keeps the registry of named redis services and reconciles it with the containers
running in the local docker engine.

Service states are never stored, they are observed through the engine on every command:
    - absent  -> no container named redis-<name>.ws
    - stopped -> container exists, not running
    - running -> container exists and running

Commands:
    - create  -> registers service intent, no container touched
    - start   -> absent: pull image, create container; stopped: start it
    - stop    -> removes container
    - destroy -> removes container, storage data and registry record
    - update  -> changes stored service params, applied by next `start --restart`

After every command changing containers set redis commander container is recreated
with fresh list of reachable redis hosts.

Used docker commands described in docker_interface
"""
