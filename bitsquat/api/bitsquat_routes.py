from fastapi import APIRouter, HTTPException

from bitsquat.config.bconfig import OUTPUT_FORMATS, PERMUTATE_EXTENSION_DEFAULT, STRICT_VARIANTS_DEFAULT
from bitsquat.models.bitsquat_request import BitsquatRequest
from bitsquat.services.bitsquatter import Bitsquatter, perform_bitsquatting
from bitsquat.services.errors import BitsquatError
from bitsquat.services.format import Format
import logging

router = APIRouter()


# Endpoint for bitsquat generation
@router.post("/generate/{url:path}")
async def generate(url: str, extension_too: bool = PERMUTATE_EXTENSION_DEFAULT, strict: bool = STRICT_VARIANTS_DEFAULT):
    try:
        domains = perform_bitsquatting(url, permutate_extension=extension_too, strict=strict)
        logging.debug("Bitsquatter valid domains count: %d", len(domains))
        return domains
    except BitsquatError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


# Endpoint for bitsquat generation with a request body and output format
@router.post("/generate")
async def generate_with_options(request: BitsquatRequest):
    if request.output_format not in OUTPUT_FORMATS:
        raise HTTPException(status_code=400, detail="Invalid output format")

    try:
        squatter = Bitsquatter(request.url, permutate_extension=request.extension_too, strict=request.strict)
        candidates = squatter.permutations()
        logging.debug("Bitsquatter valid domains count: %d", len(candidates))

        if request.output_format == "list":
            return {"domains": [candidate.domain for candidate in candidates]}
        elif request.output_format == "csv":
            return {"domains": Format(candidates).csv()}
        return {"domains": candidates}
    except BitsquatError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logging.error("Internal server error: %s", str(e))
        raise HTTPException(status_code=500, detail=str(e))


# Endpoint showing the split labels and their bitstrings
@router.get("/inspect/{url:path}")
async def inspect(url: str):
    try:
        squatter = Bitsquatter(url)
    except BitsquatError as e:
        raise HTTPException(status_code=400, detail=str(e))

    domain_bits, extension_bits = squatter.bitstrings()
    return {
        "url": url,
        "domain": squatter.domain,
        "extension": squatter.extension,
        "domain_bits": domain_bits,
        "extension_bits": extension_bits,
    }
