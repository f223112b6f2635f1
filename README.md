# postcart

Building blocks for a service that turns inbound e-mail into postcards:

- `postcart.postmark_client`: `PostmarkClient`, a small Postmark API client that sends templated mail, lists, creates and validates templates, and creates and deletes inbound trigger rules, with dataclasses for each request and reply
- `postcart.postmark_models`: dataclasses for Postmark webhook payloads (`InboundData`, `BounceData`, `DeliveredData`, `SpamComplaintData`) built with `from_dict`
- `postcart.postmark_errors`: Postmark error codes mapped to `PostmarkError` exceptions (`error_for_code`, `error_with_message`)
- `postcart.geo`: `get_country`, which resolves ISO-2 codes, ISO-3 codes and common country names to an ISO-2 code; the tables behind it are in `postcart.country_codes` (`lookup_code`) and `postcart.country_names` (`lookup_name`)
- `postcart.colors`: `Color` and helpers for choosing primary and secondary colours from a palette
- `postcart.enums`: `Artwork`, `Border`, `Font`, `GenAIProvider`, `StampShape`, `Style` and `Textured`
- `postcart.randomness`: a seedable random choice (`set_seed`, `from_sequence`)
- `postcart.upload`: upload of image bytes to tmpfiles.org, returning a direct download URL
- `postcart.splash`: an ASCII splash-screen renderer

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Usage

### Postmark client

```python
from postcart.postmark_client import NewEmailFromTemplate, PostmarkClient
from postcart.postmark_errors import PostmarkError

client = PostmarkClient(server_token="token")

try:
    client.send_with_template(
        NewEmailFromTemplate(
            from_address="Postcards <cards@example.com>",
            to="friend@example.com",
            template_alias="postcard",
            template_model={"name": "Friend"},
        )
    )
except PostmarkError as exc:
    print("Postmark refused the message:", exc.code, exc)

templates = client.list_templates(count=10, offset=0)
for info in templates.templates:
    print(info.template_id, info.name)
```

`send_with_template` raises `PostmarkError` when the reply carries a non-zero `ErrorCode`. Network failures and replies that are not valid JSON, or do not match the expected shape, raise `PostmarkRequestError`. Each request prints a `[status] url` line.

### Webhook payloads

```python
from postcart.postmark_models import InboundData

inbound = InboundData.from_dict(payload)  # payload is the decoded JSON body
print(inbound.from_full.email, inbound.subject)
```

Missing fields take empty defaults; fields of the wrong type raise `ValueError`.

### Countries

```python
from postcart.geo import get_country

get_country("United Kingdom")  # "GB"
get_country("deu")             # "DE"
get_country("Atlantis")        # "PC" when nothing matches
```

Input is lower-cased and stripped of spaces and hyphens before lookup.

### Colours

```python
from postcart.colors import Color, get_desired_colors

primary, secondary = get_desired_colors([Color(250, 250, 250), Color(200, 40, 40)])
print(primary.hex_string())  # "#C82828"
```

### Upload

```python
from postcart.upload import UploadError, upload_image

try:
    url = upload_image(jpeg_bytes)
except UploadError as exc:
    print(exc)
```

### Splash screen

```python
from postcart.splash import SplashConfig, SplashContent, splash

print(splash(SplashContent(header="postcart", center="ready"), SplashConfig(width=60, height=12)))
```

## What this package does not do

It has no command-line program and no HTTP server for receiving webhooks; the models only parse payloads you have already received. It does not render postcard images, generate artwork, extract colours from images or keep any statistics or block lists. Uploads go only to tmpfiles.org.

## Running the tests

```
pytest
```