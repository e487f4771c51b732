"""Hard limits applied when packing records into bulk API calls.

These are fixed by the hub API and are not negotiated at runtime.
"""

# a single event or workflow body must not exceed 100KB
SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES = 100 * 1024
SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES_READABLE = "100KB"

# a single identity event must not exceed 10KB
IDENTITY_SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES = 10 * 1024
IDENTITY_SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES_READABLE = "10KB"

# one API call must not carry more than 800KB
BODY_MAX_APPARENT_SIZE_IN_BYTES = 800 * 1024
BODY_MAX_APPARENT_SIZE_IN_BYTES_READABLE = "800KB"

MAX_EVENTS_IN_BULK_API = 100
MAX_WORKFLOWS_IN_BULK_API = 100
MAX_IDENTITY_EVENTS_IN_BULK_API = 400

# url-size rarely exceeds 2048 utf-8 bytes
ATTACHMENT_URL_POTENTIAL_SIZE_IN_BYTES = 2100

# keys injected in-flight add roughly 200 bytes per workflow body
WORKFLOW_RUNTIME_KEYS_POTENTIAL_SIZE_IN_BYTES = 200

ALLOW_ATTACHMENTS_IN_BULK_API = True
ATTACHMENT_UPLOAD_ENABLED = False
