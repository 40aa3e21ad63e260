import pytest

from paapi5.api.get_browse_nodes import GetBrowseNodesParams, GetBrowseNodesResponse
from paapi5.api.language import Language
from paapi5.api.resource import Resource


@pytest.fixture
def params():
    return GetBrowseNodesParams(
        browse_node_ids=["123", "4567"],
        languages_of_preference=[Language.ENGLISH_UNITED_STATES, Language.SPANISH_UNITED_STATES],
        resources=[
            Resource.BROWSE_NODE_INFO_BROWSE_NODES,
            Resource.BROWSE_NODE_INFO_BROWSE_NODES_ANCESTOR,
            Resource.IMAGES_PRIMARY_LARGE,
        ],
    )


def test_payload_counts(params):
    payload = params.payload()
    assert len(payload["BrowseNodeIds"]) == 2
    assert len(payload["LanguagesOfPreference"]) == 2
    assert len(payload["Resources"]) == 3
    assert len(params.resources) == 3


def test_payload_values(params):
    payload = params.payload()
    assert payload["BrowseNodeIds"] == ["123", "4567"]
    assert payload["LanguagesOfPreference"] == ["en_US", "es_US"]


def test_zero_browse_node_ids():
    with pytest.raises(ValueError, match="One or more browse node ids required"):
        GetBrowseNodesParams().payload()


def test_optional_keys_left_out():
    payload = GetBrowseNodesParams(browse_node_ids=["1"]).payload()
    assert payload == {"BrowseNodeIds": ["1"]}


def test_response_from_dict():
    response = GetBrowseNodesResponse.from_dict(
        {
            "BrowseNodesResult": {
                "BrowseNodes": [
                    {"Id": "6960520011", "DisplayName": "Kindle"},
                    {"Id": "281407", "DisplayName": "Books"},
                ]
            }
        }
    )
    nodes = response.browse_nodes_result.browse_nodes
    assert [n.id for n in nodes] == ["6960520011", "281407"]
    assert nodes[1].display_name == "Books"
    assert response.errors == []


def test_response_errors():
    response = GetBrowseNodesResponse.from_dict(
        {"Errors": [{"__type": "com.example#Error", "Code": "InvalidParameterValue", "Message": "bad"}]}
    )
    assert response.errors[0].code == "InvalidParameterValue"
    assert response.errors[0].message == "bad"
    assert response.browse_nodes_result.browse_nodes == []