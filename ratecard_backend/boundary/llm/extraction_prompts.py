"""
Rate card extraction prompts.

Prompt templates for the two extraction providers. The reasoning prompt asks
for a flat JSON array in canonical shape; the structured prompt asks for a
JSON object grouped by media type.

Dependencies: langchain_core.prompts
System role: Prompt templates for rate card extraction
"""

from langchain_core.prompts import ChatPromptTemplate

REASONING_PROMPT = """
You are a data extraction specialist. Extract rate card information from this document text.

Extract the following information for each advertising placement:
- Media Type (Print, Digital, Radio, TV, etc.)
- Media Format (Full Page, Half Page, Banner, etc.)
- Placement Name
- Dimensions
- Cost for 4 weeks of media
- Production Cost
- Total Cost
- Any special notes

Return the data as a JSON array with this structure:
[
  {{
    "mediaType": "Print",
    "mediaFormat": "Full Page",
    "placementName": "Premium Placement",
    "dimensions": "210mm x 297mm",
    "costMedia4weeks": "$5,000",
    "productionCost": "$800",
    "totalCost": "$5,800",
    "notes": "Prime position",
    "confidence": "high"
  }}
]

Document text:
{document_text}
"""

STRUCTURED_SYSTEM_PROMPT = """You are a data extraction specialist. Extract rate card information from the provided text and return it in JSON format with the following structure:

{{
  "mediaTypes": [
    {{
      "type": "string (e.g., 'Print', 'Digital', 'Radio', 'TV', 'Outdoor')",
      "placements": [
        {{
          "name": "string (placement name/description)",
          "size": "string (dimensions or duration)",
          "baseRate": "number (price without discounts)",
          "discountedRate": "number (price with discounts, if applicable)",
          "currency": "string (e.g., 'USD', 'EUR')",
          "unit": "string (e.g., 'per month', 'per week', 'per spot')",
          "notes": "string (additional information)"
        }}
      ]
    }}
  ],
  "validityPeriod": "string (when rates are valid)",
  "contactInfo": "string (sales contact information)",
  "additionalTerms": "string (important terms and conditions)"
}}

Extract all pricing information, media types, placement options, and relevant details. If certain information is not available, use null values."""

REASONING_EXTRACTION_PROMPT = ChatPromptTemplate.from_messages([
    ("human", REASONING_PROMPT),
])

STRUCTURED_EXTRACTION_PROMPT = ChatPromptTemplate.from_messages([
    ("system", STRUCTURED_SYSTEM_PROMPT),
    ("human", "{document_text}"),
])
