from dataclasses import dataclass
from typing import ClassVar, Dict


@dataclass(frozen=True)
class Region:
    """
    Amazon S3 region: the name used in the V4 credential scope and the
    endpoint host requests are sent to.

    The well-known AWS regions are available as class attributes, other
    S3-compatible services are described with Region.custom().
    """

    scope_name: str
    endpoint: str

    US_STANDARD: ClassVar["Region"]
    US_WEST_1: ClassVar["Region"]
    US_WEST_2: ClassVar["Region"]
    EU_WEST_1: ClassVar["Region"]
    EU_CENTRAL_1: ClassVar["Region"]
    AP_SOUTHEAST_1: ClassVar["Region"]
    AP_SOUTHEAST_2: ClassVar["Region"]
    AP_NORTHEAST_1: ClassVar["Region"]
    AP_NORTHEAST_2: ClassVar["Region"]
    SA_EAST_1: ClassVar["Region"]

    @staticmethod
    def custom(scope_name: str, endpoint: str) -> "Region":
        return Region(scope_name=scope_name, endpoint=endpoint)

    @staticmethod
    def from_name(name: str) -> "Region":
        """
        Look up a well-known region by its scope name (e.g. 'eu-west-1').

        :raises KeyError: If the region is not one of the well-known ones.
        """
        return KNOWN_REGIONS[name]

    @property
    def is_custom(self) -> bool:
        return KNOWN_REGIONS.get(self.scope_name) != self


def _aws_region(scope_name: str) -> Region:
    return Region(scope_name, f"s3-{scope_name}.amazonaws.com")


Region.US_STANDARD = Region("us-east-1", "s3.amazonaws.com")
Region.US_WEST_1 = _aws_region("us-west-1")
Region.US_WEST_2 = _aws_region("us-west-2")
Region.EU_WEST_1 = _aws_region("eu-west-1")
Region.EU_CENTRAL_1 = _aws_region("eu-central-1")
Region.AP_SOUTHEAST_1 = _aws_region("ap-southeast-1")
Region.AP_SOUTHEAST_2 = _aws_region("ap-southeast-2")
Region.AP_NORTHEAST_1 = _aws_region("ap-northeast-1")
Region.AP_NORTHEAST_2 = _aws_region("ap-northeast-2")
Region.SA_EAST_1 = _aws_region("sa-east-1")

KNOWN_REGIONS: Dict[str, Region] = {
    region.scope_name: region
    for region in (
        Region.US_STANDARD,
        Region.US_WEST_1,
        Region.US_WEST_2,
        Region.EU_WEST_1,
        Region.EU_CENTRAL_1,
        Region.AP_SOUTHEAST_1,
        Region.AP_SOUTHEAST_2,
        Region.AP_NORTHEAST_1,
        Region.AP_NORTHEAST_2,
        Region.SA_EAST_1,
    )
}
