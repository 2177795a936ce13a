from pydantic import BaseModel

from bitsquat.config.bconfig import OUTPUT_FORMAT_DEFAULT, PERMUTATE_EXTENSION_DEFAULT, STRICT_VARIANTS_DEFAULT

class BitsquatRequest(BaseModel):
    url: str
    extension_too: bool = PERMUTATE_EXTENSION_DEFAULT
    strict: bool = STRICT_VARIANTS_DEFAULT
    output_format: str = OUTPUT_FORMAT_DEFAULT
